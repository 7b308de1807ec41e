"""
Index Tools - loading documentation and reporting on the loaded index
"""

from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from tsdoc_index import (DocIndex, IndexStats, NotLoadedError, discover_doc_path,
                         get_document_fingerprint, get_index, index_loaded,
                         load_documentation)

from ..config import get_config
from ..utils import handle_mcp_errors

OVERVIEW_URI = "typedoc://overview"


def ensure_loaded() -> DocIndex:
    """Current index, loaded lazily from configuration on first use"""
    if index_loaded():
        return get_index()

    doc_path = get_config().resolve_doc_path()
    if doc_path is None:
        raise NotLoadedError(
            "Documentation not available. Set TSDOC_MCP_DOC_PATH or "
            "TSDOC_MCP_PROJECT_PATH, or call load_documentation first."
        )
    return load_documentation(doc_path)


def format_readme(readme: Union[str, Iterable[Mapping[str, Any]], None], max_length: int) -> Optional[str]:
    """Flatten README display parts to text, truncated to max_length plus '...'"""
    if not readme:
        return None
    full_text = readme if isinstance(readme, str) else "".join(part.get("text", "") for part in readme)
    if len(full_text) > max_length:
        return full_text[:max_length] + "..."
    return full_text


@handle_mcp_errors
def tool_load_documentation(doc_path: Optional[str] = None, project_path: Optional[str] = None) -> Dict[str, Any]:
    """Load (or reload) a TypeDoc JSON file - explicit path, project discovery, then config"""
    if doc_path:
        path: Optional[Path] = Path(doc_path)
    elif project_path:
        path = discover_doc_path(project_path)
        if path is None:
            raise LookupError(f"No typedoc.json found under {project_path}")
    else:
        path = get_config().resolve_doc_path()
        if path is None:
            raise LookupError("No documentation path given or configured")

    index = load_documentation(path)
    return {
        "success": True,
        "doc_path": str(path),
        "fingerprint": get_document_fingerprint(),
        "stats": index.get_stats().to_dict(),
    }


@handle_mcp_errors
def tool_get_index_stats() -> Dict[str, Any]:
    """索引统计 - 直接数据, never triggers a load"""
    loaded = index_loaded()
    stats = get_index().get_stats() if loaded else IndexStats()
    return {
        "success": True,
        "loaded": loaded,
        "fingerprint": get_document_fingerprint(),
        **stats.to_dict(),
    }


@handle_mcp_errors
def tool_get_overview() -> Dict[str, Any]:
    """Project name, version, README excerpt and symbol counts"""
    index = ensure_loaded()
    info = index.get_project_info()
    stats = index.get_stats()
    return {
        "success": True,
        "uri": OVERVIEW_URI,
        "name": "Project Overview",
        "mimeType": "application/json",
        "content": {
            "name": info.get("name") or "Unknown Project",
            "version": info.get("version"),
            "description": format_readme(info.get("readme"), get_config().readme_max_chars),
            "stats": {
                "totalSymbols": stats.total,
                "modules": stats.modules,
                "classes": stats.classes,
                "interfaces": stats.interfaces,
                "functions": stats.functions,
                "types": stats.types,
                "enums": stats.enums,
                "variables": stats.variables,
            },
        },
    }
