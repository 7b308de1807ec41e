"""
Documentation Tools - full documentation and member listings for one symbol

Type rendering is a lookup on the TypeDoc type node's ``type`` field;
anything unrecognised falls back to its name.
"""

import json
from typing import Any, Dict, List, Mapping, Optional

from tsdoc_index import (ReflectionKind, block_tags, join_parts, kind_label,
                         summary_text, tag_text)

from ..utils import handle_mcp_errors
from .index_tools import ensure_loaded

MEMBER_TYPES = {
    "property": ReflectionKind.PROPERTY,
    "method": ReflectionKind.METHOD,
    "all": None,
}


def format_type(type_node: Optional[Mapping[str, Any]]) -> str:
    """Render a TypeDoc type node as TypeScript-like text"""
    if not type_node:
        return "any"

    kind = type_node.get("type")
    if kind == "intrinsic":
        return type_node.get("name") or "any"
    if kind == "reference":
        return type_node.get("name") or "unknown"
    if kind == "array":
        return f"{format_type(type_node.get('elementType'))}[]"
    if kind in ("union", "intersection"):
        parts = type_node.get("types") or []
        if not parts:
            return "unknown"
        separator = " | " if kind == "union" else " & "
        return separator.join(format_type(part) for part in parts)
    if kind == "literal":
        return json.dumps(type_node.get("value"))
    if kind == "reflection":
        return "object"
    return type_node.get("name") or "unknown"


def signature_string(signature: Mapping[str, Any]) -> str:
    params = ", ".join(
        f"{p.get('name')}: {format_type(p.get('type'))}"
        for p in signature.get("parameters") or []
    )
    return f"({params}) => {format_type(signature.get('type'))}"


def access_level(reflection: Mapping[str, Any]) -> str:
    flags = reflection.get("flags") or {}
    if flags.get("isPrivate"):
        return "private"
    if flags.get("isProtected"):
        return "protected"
    return "public"


def _member_type_string(member: Mapping[str, Any]) -> str:
    if member.get("type"):
        return format_type(member["type"])
    signatures = member.get("signatures") or []
    if signatures:
        return signature_string(signatures[0])
    return "unknown"


def _inherited_from_name(inherited_from: Any) -> str:
    if isinstance(inherited_from, Mapping) and inherited_from.get("name"):
        return inherited_from["name"]
    return "unknown"


@handle_mcp_errors
def tool_get_documentation(symbol_id: Optional[int] = None, symbol_path: Optional[str] = None) -> Dict[str, Any]:
    """Complete documentation for one symbol, addressed by id or by dotted path"""
    if symbol_id is None and symbol_path is None:
        raise ValueError("Either symbol_id or symbol_path must be provided")

    index = ensure_loaded()
    if symbol_id is not None:
        reflection = index.get_by_id(symbol_id)
    else:
        symbol = index.find_by_path(symbol_path)
        reflection = symbol.reflection if symbol else None

    if reflection is None:
        raise LookupError(f"Symbol not found: {symbol_id if symbol_id is not None else symbol_path}")

    signatures = reflection.get("signatures") or []
    # TypeDoc attaches function and method comments to the first signature
    commented = reflection if reflection.get("comment") or not signatures else signatures[0]

    doc: Dict[str, Any] = {
        "success": True,
        "id": reflection["id"],
        "name": reflection["name"],
        "kind": reflection.get("kindString") or kind_label(reflection.get("kind")),
        "path": index.get_path(reflection),
        "description": summary_text(commented),
    }

    examples = [
        join_parts(block.get("content"))
        for block in block_tags(commented)
        if block.get("tag") == "@example"
    ]
    if examples:
        doc["examples"] = examples

    if signatures:
        signature = signatures[0]
        if signature.get("parameters"):
            doc["parameters"] = [
                {
                    "name": p.get("name"),
                    "type": format_type(p.get("type")),
                    "description": summary_text(p),
                    "optional": bool((p.get("flags") or {}).get("isOptional")),
                    "default": p.get("defaultValue"),
                }
                for p in signature["parameters"]
            ]
        if signature.get("type"):
            doc["returns"] = {
                "type": format_type(signature["type"]),
                "description": tag_text(signature, "returns") or "",
            }

    for tag in ("deprecated", "since"):
        text = tag_text(commented, tag)
        if text:
            doc[tag] = text

    if reflection.get("flags") is not None:
        doc["access"] = access_level(reflection)

    sources = reflection.get("sources") or []
    if sources:
        doc["source"] = {
            "fileName": sources[0].get("fileName"),
            "line": sources[0].get("line"),
            "url": sources[0].get("url"),
        }

    return doc


@handle_mcp_errors
def tool_get_members(symbol_id: int, member_type: str = "all", include_inherited: bool = False) -> Dict[str, Any]:
    """Properties and methods of a class or interface"""
    if member_type not in MEMBER_TYPES:
        raise ValueError(f"member_type must be one of {', '.join(MEMBER_TYPES)}")

    index = ensure_loaded()
    reflection = index.get_by_id(symbol_id)
    if reflection is None:
        raise LookupError(f"Symbol not found: {symbol_id}")
    if reflection.get("kind") not in (ReflectionKind.CLASS, ReflectionKind.INTERFACE):
        raise ValueError("Symbol must be a class or interface")

    wanted = MEMBER_TYPES[member_type]
    members: List[Dict[str, Any]] = []
    for child in reflection.get("children") or []:
        if wanted is not None and child.get("kind") != wanted:
            continue
        inherited_from = child.get("inheritedFrom")
        if inherited_from and not include_inherited:
            continue

        flags = child.get("flags") or {}
        members.append({
            "id": child.get("id"),
            "name": child.get("name"),
            "kind": child.get("kindString") or kind_label(child.get("kind")).lower(),
            "type": _member_type_string(child),
            "access": access_level(child),
            "static": bool(flags.get("isStatic")),
            "abstract": bool(flags.get("isAbstract")),
            "optional": bool(flags.get("isOptional")),
            "readonly": bool(flags.get("isReadonly")),
            "inherited": bool(inherited_from),
            "inheritedFrom": _inherited_from_name(inherited_from) if inherited_from else None,
            "description": summary_text(child),
        })

    return {"success": True, "members": members, "count": len(members)}
