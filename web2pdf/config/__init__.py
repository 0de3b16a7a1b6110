"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Credentials, service address and runtime settings
- logging: Structured logging configuration
"""
