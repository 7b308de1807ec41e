"""Linus-style MCP server for TypeDoc documentation."""
import json
import logging
import sys
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, Optional

from mcp.server.fastmcp import FastMCP

from .config import ServerConfig, get_config
from .tool_registry import execute_tool
from .tools import OVERVIEW_URI
from .utils import handle_mcp_resource_errors

logger = logging.getLogger(__name__)


@dataclass
class DocServerContext:
    config: ServerConfig


@asynccontextmanager
async def server_lifespan(_server: FastMCP) -> AsyncIterator[DocServerContext]:
    config = get_config()
    doc_path = config.resolve_doc_path()
    if doc_path is None:
        logger.warning(
            "No TSDOC_MCP_DOC_PATH or TSDOC_MCP_PROJECT_PATH configured; "
            "call load_documentation before querying"
        )
    else:
        # Parsing waits for the first tool call
        logger.info("Documentation will be loaded from %s", doc_path)
    yield DocServerContext(config=config)


mcp = FastMCP(get_config().server_name, lifespan=server_lifespan)


@mcp.resource(OVERVIEW_URI, name="Project Overview", mime_type="application/json")
@handle_mcp_resource_errors
def get_overview() -> str:
    """Overview of the TypeScript project documentation"""
    result = execute_tool("get_overview")
    if not result.get("success"):
        return f"Error: {result.get('error')}"
    return json.dumps(result["content"], indent=2)


@mcp.tool()
def find_symbol(name: str, kind: Optional[str] = None, exact: bool = True) -> Dict[str, Any]:
    """
    Find symbols by name and optionally filter by kind.

    Args:
        name: Symbol name to search for
        kind: class, interface, function, type, enum or variable
        exact: Exact match (True) or case-insensitive partial match (False)
    """
    return execute_tool("find_symbol", name=name, kind=kind, exact=exact)


@mcp.tool()
def get_documentation(symbol_id: Optional[int] = None, symbol_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Get complete documentation for a symbol.

    Args:
        symbol_id: TypeDoc ID of the symbol
        symbol_path: Full path to the symbol (e.g. "my-lib.MyClass.myMethod")
    """
    return execute_tool("get_documentation", symbol_id=symbol_id, symbol_path=symbol_path)


@mcp.tool()
def get_members(symbol_id: int, member_type: str = "all", include_inherited: bool = False) -> Dict[str, Any]:
    """
    Get all members of a class or interface.

    Args:
        symbol_id: TypeDoc ID of the class or interface
        member_type: property, method or all
        include_inherited: Include inherited members
    """
    return execute_tool(
        "get_members",
        symbol_id=symbol_id,
        member_type=member_type,
        include_inherited=include_inherited,
    )


@mcp.tool()
def search_by_tag(tag: str, value: Optional[str] = None) -> Dict[str, Any]:
    """
    Search symbols by JSDoc tags.

    Args:
        tag: Tag to search for, without @ (e.g. "deprecated", "beta", "internal")
        value: Optional text the tag content must contain
    """
    return execute_tool("search_by_tag", tag=tag, value=value)


@mcp.tool()
def load_documentation(doc_path: Optional[str] = None, project_path: Optional[str] = None) -> Dict[str, Any]:
    """Load or reload a TypeDoc JSON file, directly or by searching a project directory."""
    return execute_tool("load_documentation", doc_path=doc_path, project_path=project_path)


@mcp.tool()
def get_index_stats() -> Dict[str, Any]:
    """Symbol counts of the loaded documentation."""
    return execute_tool("get_index_stats")


def main():
    logging.basicConfig(level=get_config().get_log_level(), stream=sys.stderr)
    mcp.run()


if __name__ == '__main__':
    main()
