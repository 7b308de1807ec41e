"""
TypeDoc reflection kinds - direct table lookup, no branches

Tags are bit-flag shaped but only ever used as discrete keys.
"""

from enum import IntEnum
from typing import Dict, Optional, Union


class ReflectionKind(IntEnum):
    PROJECT = 1
    MODULE = 2
    NAMESPACE = 4
    ENUM = 8
    ENUM_MEMBER = 16
    VARIABLE = 32
    FUNCTION = 64
    CLASS = 128
    INTERFACE = 256
    CONSTRUCTOR = 512
    PROPERTY = 1024
    METHOD = 2048
    CALL_SIGNATURE = 4096
    INDEX_SIGNATURE = 8192
    CONSTRUCTOR_SIGNATURE = 16384
    PARAMETER = 32768
    TYPE_LITERAL = 65536
    TYPE_PARAMETER = 131072
    ACCESSOR = 262144
    GET_SIGNATURE = 524288
    SET_SIGNATURE = 1048576
    TYPE_ALIAS = 2097152
    REFERENCE = 4194304


KIND_LABELS: Dict[ReflectionKind, str] = {
    ReflectionKind.PROJECT: "Project",
    ReflectionKind.MODULE: "Module",
    ReflectionKind.NAMESPACE: "Namespace",
    ReflectionKind.ENUM: "Enum",
    ReflectionKind.ENUM_MEMBER: "Enum member",
    ReflectionKind.VARIABLE: "Variable",
    ReflectionKind.FUNCTION: "Function",
    ReflectionKind.CLASS: "Class",
    ReflectionKind.INTERFACE: "Interface",
    ReflectionKind.CONSTRUCTOR: "Constructor",
    ReflectionKind.PROPERTY: "Property",
    ReflectionKind.METHOD: "Method",
    ReflectionKind.CALL_SIGNATURE: "Call signature",
    ReflectionKind.INDEX_SIGNATURE: "Index signature",
    ReflectionKind.CONSTRUCTOR_SIGNATURE: "Constructor signature",
    ReflectionKind.PARAMETER: "Parameter",
    ReflectionKind.TYPE_LITERAL: "Type literal",
    ReflectionKind.TYPE_PARAMETER: "Type parameter",
    ReflectionKind.ACCESSOR: "Accessor",
    ReflectionKind.GET_SIGNATURE: "Get signature",
    ReflectionKind.SET_SIGNATURE: "Set signature",
    ReflectionKind.TYPE_ALIAS: "Type alias",
    ReflectionKind.REFERENCE: "Reference",
}

# Friendly filter names accepted by the find_symbol tool
KIND_FILTERS: Dict[str, ReflectionKind] = {
    "class": ReflectionKind.CLASS,
    "interface": ReflectionKind.INTERFACE,
    "function": ReflectionKind.FUNCTION,
    "type": ReflectionKind.TYPE_ALIAS,
    "enum": ReflectionKind.ENUM,
    "variable": ReflectionKind.VARIABLE,
}


def kind_label(kind: Optional[int]) -> str:
    """Human-readable label for a kind tag, "Unknown" when unmapped."""
    try:
        return KIND_LABELS[ReflectionKind(kind)]
    except (ValueError, TypeError):
        return "Unknown"


def parse_kind(value: Union[ReflectionKind, int, str]) -> ReflectionKind:
    """Normalize an enum member, raw tag, or friendly name to a ReflectionKind."""
    if isinstance(value, ReflectionKind):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid kind: {value!r}")
    if isinstance(value, int):
        try:
            return ReflectionKind(value)
        except ValueError:
            raise ValueError(f"Unknown kind tag: {value}") from None
    if isinstance(value, str):
        key = value.strip().lower()
        if key in KIND_FILTERS:
            return KIND_FILTERS[key]
        raise ValueError(
            f"Unknown kind filter: {value!r} (expected one of {', '.join(KIND_FILTERS)})"
        )
    raise ValueError(f"Invalid kind: {value!r}")
