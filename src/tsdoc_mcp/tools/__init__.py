"""
Tools - query callers over the documentation index

Every tool returns a dict with a ``success`` flag; see utils.error_handler.
"""

from .documentation_tools import format_type, tool_get_documentation, tool_get_members
from .index_tools import (OVERVIEW_URI, ensure_loaded, format_readme, tool_get_index_stats,
                          tool_get_overview, tool_load_documentation)
from .symbol_tools import tool_find_symbol, tool_search_by_tag

__all__ = [
    'OVERVIEW_URI',
    'ensure_loaded',
    'format_readme',
    'format_type',
    'tool_find_symbol',
    'tool_get_documentation',
    'tool_get_index_stats',
    'tool_get_members',
    'tool_get_overview',
    'tool_load_documentation',
    'tool_search_by_tag',
]
