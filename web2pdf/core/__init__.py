"""
Core Client Logic
=================

Components:
- client: Authenticated Web2PDF HTTP client
- transport: Pluggable HTTP transports
- tree_renderer: Component-tree to HTML rendering
- builder: Shared validation, request assembly and result mapping
- pdf / screenshot: The two service operations
"""
