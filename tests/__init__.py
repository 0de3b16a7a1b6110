"""
Test Suite
==========

Test suite matching the web2pdf/ package structure.

Test Categories:
- unit: Unit tests for the client, transports, renderer and operations
"""
