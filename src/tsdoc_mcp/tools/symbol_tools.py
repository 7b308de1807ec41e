"""
Symbol Tools - name and tag lookups over the loaded documentation
"""

from typing import Any, Dict, Optional

from tsdoc_index import first_source, parse_kind

from ..utils import handle_mcp_errors
from .index_tools import ensure_loaded


@handle_mcp_errors
def tool_find_symbol(name: str, kind: Optional[str] = None, exact: bool = True) -> Dict[str, Any]:
    """
    Find symbols by name, optionally narrowed to one kind.

    kind: class, interface, function, type, enum or variable.
    exact=False switches to case-insensitive substring matching.
    """
    target = parse_kind(kind) if kind else None
    index = ensure_loaded()

    symbols = index.find_by_name(name, exact)
    if target is not None:
        symbols = [s for s in symbols if s.reflection.get("kind") == target]

    return {
        "success": True,
        "symbols": [s.to_dict() for s in symbols],
        "count": len(symbols),
    }


@handle_mcp_errors
def tool_search_by_tag(tag: str, value: Optional[str] = None) -> Dict[str, Any]:
    """
    Find symbols carrying a documentation tag such as deprecated, beta or internal.

    value: optional substring the tag text must contain.
    """
    index = ensure_loaded()
    results = []
    for symbol, text in index.search_by_tag(tag, value):
        entry = {
            "name": symbol.name,
            "kind": symbol.kind,
            "path": symbol.path,
            "id": symbol.id,
            "tagValue": text,
        }
        source = first_source(symbol.reflection)
        if source:
            entry["source"] = source
        results.append(entry)

    return {"success": True, "symbols": results, "count": len(results)}
