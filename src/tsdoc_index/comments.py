"""
Comment helpers - read TypeDoc comment payloads without interpreting them.

The index never looks inside comments; these helpers are for query callers
that filter or display documentation text.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional


def join_parts(parts: Optional[Iterable[Mapping[str, Any]]]) -> str:
    """Concatenate CommentDisplayPart texts and strip the result."""
    if not parts:
        return ""
    return "".join(part.get("text", "") for part in parts if isinstance(part, Mapping)).strip()


def normalize_tag(tag: str) -> str:
    return tag if tag.startswith("@") else f"@{tag}"


def _comment(reflection: Mapping[str, Any]) -> Mapping[str, Any]:
    comment = reflection.get("comment")
    return comment if isinstance(comment, Mapping) else {}


def block_tags(reflection: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """Block tags of the comment; empty for missing or non-object comments."""
    tags = _comment(reflection).get("blockTags")
    if not isinstance(tags, list):
        return []
    return [block for block in tags if isinstance(block, Mapping)]


def find_block_tag(reflection: Mapping[str, Any], tag: str) -> Optional[Dict[str, Any]]:
    """First block tag named ``tag`` ("@" prefix optional), or None."""
    tag_name = normalize_tag(tag)
    for block in block_tags(reflection):
        if block.get("tag") == tag_name:
            return block
    return None


def tag_text(reflection: Mapping[str, Any], tag: str) -> Optional[str]:
    block = find_block_tag(reflection, tag)
    if block is None:
        return None
    return join_parts(block.get("content"))


def summary_text(reflection: Mapping[str, Any]) -> str:
    summary = _comment(reflection).get("summary")
    return join_parts(summary if isinstance(summary, list) else None)


def first_source(reflection: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """fileName/line of the first source location, if any."""
    sources = reflection.get("sources") or []
    if not sources:
        return None
    source = sources[0]
    return {"fileName": source.get("fileName"), "line": source.get("line")}
