"""
TypeDoc index core - single data structure, no abstractions.
"""

from .comments import (block_tags, find_block_tag, first_source, join_parts, summary_text,
                       tag_text)
from .errors import DocIndexError, LoadFailure, NotLoadedError
from .index import (DocIndex, IndexStats, ParsedSymbol, get_document_fingerprint,
                    get_index, index_loaded, load_documentation, reset_index)
from .kinds import KIND_FILTERS, ReflectionKind, kind_label, parse_kind
from .source import JsonDocumentSource, discover_doc_path

__all__ = [
    "DocIndex",
    "ParsedSymbol",
    "IndexStats",
    "DocIndexError",
    "LoadFailure",
    "NotLoadedError",
    "ReflectionKind",
    "KIND_FILTERS",
    "kind_label",
    "parse_kind",
    "JsonDocumentSource",
    "discover_doc_path",
    "get_index",
    "index_loaded",
    "load_documentation",
    "get_document_fingerprint",
    "reset_index",
    "block_tags",
    "find_block_tag",
    "first_source",
    "join_parts",
    "summary_text",
    "tag_text",
]
