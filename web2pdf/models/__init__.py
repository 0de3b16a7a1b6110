"""
Data Models
===========

Pydantic models shared by the client, the renderer and the operations.
"""
