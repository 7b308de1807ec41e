"""TypeDoc MCP server - serves TypeDoc JSON documentation to AI agents."""

__version__ = "0.1.0"
