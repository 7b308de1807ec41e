"""
Linus-style documentation index - four dicts, one traversal.

Bad programmers worry about the code. Good programmers worry about data
structures: an id index, a name index, a path index and a kind index, all
filled by a single depth-first walk and never mutated afterwards.
"""

import logging
import threading
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import (Any, Callable, Dict, Iterator, List, Mapping, Optional,
                    Tuple, Union)

from .comments import find_block_tag, first_source, join_parts, normalize_tag
from .errors import LoadFailure, NotLoadedError
from .kinds import ReflectionKind, kind_label, parse_kind
from .source import JsonDocumentSource

logger = logging.getLogger(__name__)

Reflection = Dict[str, Any]
KindLike = Union[ReflectionKind, int, str]


@dataclass
class ParsedSymbol:
    """A resolved index entry; ``reflection`` is the indexed node itself."""
    id: int
    name: str
    kind: str
    path: str
    reflection: Reflection = field(repr=False, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "kind": self.kind,
            "path": self.path,
        }
        source = first_source(self.reflection)
        if source:
            result["source"] = source
        return result


@dataclass
class IndexStats:
    total: int = 0
    classes: int = 0
    interfaces: int = 0
    functions: int = 0
    variables: int = 0
    types: int = 0
    enums: int = 0
    modules: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


class DocIndex:
    """
    In-memory index over one TypeDoc document.

    Write once (``load``), read many. Paths are dot-joined names from the
    root; when two nodes produce the same path the later one in traversal
    order owns it. A repeated id also resolves to the later node, so its
    name and kind buckets list that id once per occurrence.
    """

    def __init__(self):
        self._clear()

    def _clear(self) -> None:
        self._by_id: Dict[int, Reflection] = {}
        self._by_name: Dict[str, List[int]] = {}
        self._by_path: Dict[str, int] = {}
        self._by_kind: Dict[int, List[int]] = {}
        self._path_of: Dict[int, str] = {}
        self._root: Optional[Reflection] = None

    @property
    def loaded(self) -> bool:
        return self._root is not None

    def load(self, root: Optional[Mapping[str, Any]]) -> None:
        """
        Build all indices from ``root``.

        Raises LoadFailure on malformed input; the index is left unloaded
        in that case, even if an earlier load had succeeded.
        """
        self._clear()
        if root is None:
            raise LoadFailure("No document to load")
        if not isinstance(root, Mapping):
            raise LoadFailure(f"Document root must be an object, got {type(root).__name__}")

        by_id: Dict[int, Reflection] = {}
        by_name: Dict[str, List[int]] = {}
        by_path: Dict[str, int] = {}
        by_kind: Dict[int, List[int]] = {}
        path_of: Dict[int, str] = {}

        # Explicit stack: deep trees must not hit the recursion limit
        stack: List[Tuple[Any, str]] = [(root, "")]
        while stack:
            node, parent_path = stack.pop()
            node_id, name, kind = _node_keys(node)

            if node_id in by_id:
                logger.debug("Id %s seen again at %r; later node replaces it", node_id, name)
            by_id[node_id] = node

            path = f"{parent_path}.{name}" if parent_path else name
            previous = by_path.get(path)
            if previous is not None and previous != node_id:
                logger.debug("Path %r: id %s replaces id %s", path, node_id, previous)
            by_path[path] = node_id
            path_of[node_id] = path

            by_name.setdefault(name, []).append(node_id)
            if kind:
                by_kind.setdefault(kind, []).append(node_id)

            # Signatures share the parent's path segment, like children
            nested = _nested(node, "children") + _nested(node, "signatures")
            for child in reversed(nested):
                stack.append((child, path))

        self._by_id = by_id
        self._by_name = by_name
        self._by_path = by_path
        self._by_kind = by_kind
        self._path_of = path_of
        self._root = root
        logger.debug("Indexed %d reflections, %d paths", len(by_id), len(by_path))

    def _require_loaded(self) -> None:
        if self._root is None:
            raise NotLoadedError()

    # ===== queries =====

    def get_by_id(self, symbol_id: int) -> Optional[Reflection]:
        self._require_loaded()
        return self._by_id.get(symbol_id)

    def find_by_name(self, name: str, exact: bool = True) -> List[ParsedSymbol]:
        """
        Exact: every node named ``name`` in discovery order.
        Partial: case-insensitive substring over all names, grouped by name.
        """
        self._require_loaded()
        if exact:
            ids = self._by_name.get(name, [])
        else:
            needle = name.lower()
            ids = [
                symbol_id
                for symbol_name, bucket in self._by_name.items()
                if needle in symbol_name.lower()
                for symbol_id in bucket
            ]
        return self._resolve_all(ids)

    def find_by_path(self, path: str) -> Optional[ParsedSymbol]:
        self._require_loaded()
        symbol_id = self._by_path.get(path)
        if symbol_id is None:
            return None
        reflection = self._by_id.get(symbol_id)
        return self._to_symbol(reflection) if reflection is not None else None

    def find_by_kind(self, kind: KindLike) -> List[ParsedSymbol]:
        self._require_loaded()
        return self._resolve_all(self._by_kind.get(_kind_key(kind), []))

    def get_stats(self) -> IndexStats:
        """Counts straight from the live indices; all zero before a load."""
        def count(kind: ReflectionKind) -> int:
            return len(self._by_kind.get(kind, ()))

        return IndexStats(
            total=len(self._by_id),
            classes=count(ReflectionKind.CLASS),
            interfaces=count(ReflectionKind.INTERFACE),
            functions=count(ReflectionKind.FUNCTION),
            variables=count(ReflectionKind.VARIABLE),
            types=count(ReflectionKind.TYPE_ALIAS),
            enums=count(ReflectionKind.ENUM),
            modules=count(ReflectionKind.MODULE),
        )

    def get_path(self, reflection: Mapping[str, Any]) -> str:
        """Path a node was registered under; its bare name if never indexed."""
        path = self._path_of.get(reflection.get("id"))
        if path is None:
            return reflection.get("name", "")
        return path

    def get_project_info(self) -> Dict[str, Any]:
        self._require_loaded()
        return {
            "name": self._root.get("name"),
            "version": self._root.get("packageVersion"),
            "readme": self._root.get("readme"),
        }

    def iter_symbols(
        self, predicate: Optional[Callable[[Reflection], bool]] = None
    ) -> Iterator[ParsedSymbol]:
        """
        Every indexed node in discovery order, optionally filtered.

        Each call returns a fresh generator, so the sequence can be walked
        again from the start.
        """
        self._require_loaded()
        return self._walk(predicate)

    def _walk(self, predicate: Optional[Callable[[Reflection], bool]]) -> Iterator[ParsedSymbol]:
        for reflection in self._by_id.values():
            if predicate is None or predicate(reflection):
                yield self._to_symbol(reflection)

    def search_by_tag(self, tag: str, value: Optional[str] = None) -> List[Tuple[ParsedSymbol, str]]:
        """
        Symbols whose comment carries block tag ``tag`` (e.g. "deprecated").

        With ``value``, the joined tag text must contain it as a substring.
        """
        tag_name = normalize_tag(tag)
        results = []
        for symbol in self.iter_symbols(lambda node: find_block_tag(node, tag_name) is not None):
            text = join_parts(find_block_tag(symbol.reflection, tag_name).get("content"))
            if value and value not in text:
                continue
            results.append((symbol, text))
        return results

    # ===== internals =====

    def _resolve_all(self, ids: List[int]) -> List[ParsedSymbol]:
        results = []
        for symbol_id in ids:
            reflection = self._by_id.get(symbol_id)
            if reflection is not None:
                results.append(self._to_symbol(reflection))
        return results

    def _to_symbol(self, reflection: Reflection) -> ParsedSymbol:
        return ParsedSymbol(
            id=reflection["id"],
            name=reflection["name"],
            kind=reflection.get("kindString") or kind_label(reflection.get("kind")),
            path=self.get_path(reflection),
            reflection=reflection,
        )

    def __len__(self) -> int:
        return len(self._by_id)


def _node_keys(node: Any) -> Tuple[int, str, Optional[int]]:
    """Validate the fields the index keys on; reject the node otherwise."""
    if not isinstance(node, Mapping):
        raise LoadFailure(f"Reflection must be an object, got {type(node).__name__}")

    node_id = node.get("id")
    name = node.get("name")
    kind = node.get("kind")

    if isinstance(node_id, bool) or not isinstance(node_id, int):
        raise LoadFailure(f"Reflection {name!r} has no integer id")
    if not isinstance(name, str):
        raise LoadFailure(f"Reflection {node_id} has no name")
    if kind is not None and (isinstance(kind, bool) or not isinstance(kind, int)):
        raise LoadFailure(f"Reflection {node_id} has a non-integer kind: {kind!r}")
    return node_id, name, kind


def _nested(node: Mapping[str, Any], key: str) -> List[Any]:
    value = node.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise LoadFailure(f"Reflection {node.get('id')}: '{key}' must be a list")
    return value


def _kind_key(kind: KindLike) -> int:
    # Raw int tags pass through so kinds newer than ReflectionKind still match
    if isinstance(kind, int) and not isinstance(kind, bool):
        return int(kind)
    return int(parse_kind(kind))


# ===== process-wide index - load then freeze =====

_global_index: Optional[DocIndex] = None
_global_source: Optional[JsonDocumentSource] = None
_index_lock = threading.RLock()


def get_index() -> DocIndex:
    """Current index - thread safe; NotLoadedError until a load succeeds."""
    with _index_lock:
        if _global_index is None:
            raise NotLoadedError()
        return _global_index


def index_loaded() -> bool:
    with _index_lock:
        return _global_index is not None


def get_document_fingerprint() -> Optional[str]:
    with _index_lock:
        return _global_source.fingerprint if _global_source is not None else None


def load_documentation(doc_path: Union[str, Path]) -> DocIndex:
    """
    Read ``doc_path`` and swap in a freshly built index.

    Readers never see a half-built index: the new one is published only
    after ``load`` returns. A failed load leaves nothing loaded.
    """
    global _global_index, _global_source
    with _index_lock:
        _global_index = None
        _global_source = None

        source = JsonDocumentSource(doc_path)
        index = DocIndex()
        index.load(source.read())

        _global_index = index
        _global_source = source

    stats = index.get_stats()
    logger.info(
        "Loaded %s: %d symbols (%d classes, %d interfaces, %d functions)",
        doc_path, stats.total, stats.classes, stats.interfaces, stats.functions,
    )
    return index


def reset_index() -> None:
    """Drop the loaded index (mainly for testing)"""
    global _global_index, _global_source
    with _index_lock:
        _global_index = None
        _global_source = None
