"""
Tool Registry - 工具注册表

One name -> function table instead of a dispatch if/else chain.
"""

from typing import Any, Callable, Dict

from .tools import (tool_find_symbol, tool_get_documentation, tool_get_index_stats,
                    tool_get_members, tool_get_overview, tool_load_documentation,
                    tool_search_by_tag)

TOOL_REGISTRY: Dict[str, Callable[..., Dict[str, Any]]] = {
    "load_documentation": tool_load_documentation,
    "find_symbol": tool_find_symbol,
    "get_documentation": tool_get_documentation,
    "get_members": tool_get_members,
    "search_by_tag": tool_search_by_tag,
    "get_overview": tool_get_overview,
    "get_index_stats": tool_get_index_stats,
}


def get_tool_registry() -> Dict[str, Callable[..., Dict[str, Any]]]:
    return dict(TOOL_REGISTRY)


def execute_tool(tool_name: str, **kwargs) -> Dict[str, Any]:
    """
    统一工具执行器 - single entry point, no special cases

    Tools turn their own failures (bad arguments included) into error
    dicts via handle_mcp_errors.
    """
    tool_func = TOOL_REGISTRY.get(tool_name)
    if not tool_func:
        return {"success": False, "error": f"Unknown tool: {tool_name}"}
    return tool_func(**kwargs)
