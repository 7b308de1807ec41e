"""
Utility modules for the TypeDoc MCP server.

- error_handler: Decorator-based error handling for MCP entry points
"""

from .error_handler import handle_mcp_errors, handle_mcp_resource_errors

__all__ = [
    'handle_mcp_errors',
    'handle_mcp_resource_errors',
]
