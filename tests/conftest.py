"""Pytest configuration and shared fixtures.

Following Linus's principle: "Simplicity is the ultimate sophistication."
One realistic TypeDoc document, written to disk when a test needs a file.
"""

import json
import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tsdoc_index import reset_index  # noqa: E402
from tsdoc_mcp.config import reset_config  # noqa: E402

ENV_VARS = [
    "TSDOC_MCP_DOC_PATH",
    "TSDOC_MCP_PROJECT_PATH",
    "TSDOC_MCP_SERVER_NAME",
    "TSDOC_MCP_LOG_LEVEL",
    "TSDOC_MCP_README_MAX_CHARS",
]


def text(value):
    return [{"kind": "text", "text": value}]


def make_sample_doc():
    """TypeDoc JSON for a small widget library.

    Discovery order of indexed ids: 0 1 2 3 4 5 6 8 9 10 11 12 13 14 15 16 17
    (parameters are not indexed, so id 7 never appears).
    """
    return {
        "id": 0,
        "name": "my-lib",
        "kind": 1,
        "packageVersion": "1.2.3",
        "readme": text("# my-lib\nA widget library."),
        "children": [
            {
                "id": 1,
                "name": "Widget",
                "kind": 128,
                "flags": {},
                "comment": {
                    "summary": text("A renderable widget."),
                    "blockTags": [{"tag": "@since", "content": text("1.0")}],
                },
                "sources": [{
                    "fileName": "src/widget.ts",
                    "line": 10,
                    "character": 0,
                    "url": "https://example.com/src/widget.ts#L10",
                }],
                "children": [
                    {
                        "id": 2,
                        "name": "constructor",
                        "kind": 512,
                        "signatures": [{
                            "id": 3,
                            "name": "new Widget",
                            "kind": 16384,
                            "type": {"type": "reference", "name": "Widget"},
                        }],
                    },
                    {
                        "id": 4,
                        "name": "size",
                        "kind": 1024,
                        "flags": {"isReadonly": True},
                        "type": {"type": "intrinsic", "name": "number"},
                        "comment": {"summary": text("Pixel size.")},
                    },
                    {
                        "id": 5,
                        "name": "render",
                        "kind": 2048,
                        "flags": {"isProtected": True},
                        "signatures": [{
                            "id": 6,
                            "name": "render",
                            "kind": 4096,
                            "comment": {
                                "summary": text("Draws the widget."),
                                "blockTags": [{"tag": "@returns", "content": text("The markup.")}],
                            },
                            "parameters": [{
                                "id": 7,
                                "name": "target",
                                "kind": 32768,
                                "flags": {"isOptional": True},
                                "comment": {"summary": text("Mount point.")},
                                "type": {
                                    "type": "union",
                                    "types": [
                                        {"type": "reference", "name": "HTMLElement"},
                                        {"type": "intrinsic", "name": "null"},
                                    ],
                                },
                            }],
                            "type": {"type": "intrinsic", "name": "string"},
                        }],
                    },
                    {
                        "id": 8,
                        "name": "dispose",
                        "kind": 2048,
                        "inheritedFrom": {"type": "reference", "name": "Base.dispose"},
                        "signatures": [{
                            "id": 9,
                            "name": "dispose",
                            "kind": 4096,
                            "type": {"type": "intrinsic", "name": "void"},
                        }],
                    },
                ],
            },
            {
                "id": 10,
                "name": "WidgetOptions",
                "kind": 256,
                "children": [{
                    "id": 11,
                    "name": "size",
                    "kind": 1024,
                    "flags": {"isOptional": True},
                    "type": {"type": "intrinsic", "name": "number"},
                }],
            },
            {
                "id": 12,
                "name": "createWidget",
                "kind": 64,
                "signatures": [{
                    "id": 13,
                    "name": "createWidget",
                    "kind": 4096,
                    "comment": {
                        "summary": text("Builds a widget."),
                        "blockTags": [
                            {"tag": "@deprecated", "content": text("Use new Widget() instead.")},
                            {"tag": "@example", "content": [{"kind": "code", "text": "createWidget()"}]},
                        ],
                    },
                    "type": {"type": "reference", "name": "Widget"},
                }],
            },
            {
                "id": 14,
                "name": "Color",
                "kind": 8,
                "children": [{
                    "id": 15,
                    "name": "Red",
                    "kind": 16,
                    "type": {"type": "literal", "value": "red"},
                }],
            },
            {
                "id": 16,
                "name": "WidgetSize",
                "kind": 2097152,
                "type": {
                    "type": "union",
                    "types": [
                        {"type": "literal", "value": "small"},
                        {"type": "literal", "value": "large"},
                    ],
                },
            },
            {
                "id": 17,
                "name": "VERSION",
                "kind": 32,
                "flags": {"isConst": True},
                "type": {"type": "intrinsic", "name": "string"},
                "comment": {
                    "summary": [],
                    "blockTags": [{"tag": "@deprecated", "content": text("Read packageVersion.")}],
                },
            },
        ],
    }


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """No configuration or loaded documentation leaks between tests."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_config()
    reset_index()
    yield
    reset_config()
    reset_index()


@pytest.fixture
def sample_doc():
    return make_sample_doc()


@pytest.fixture
def doc_file(tmp_path, sample_doc):
    """Sample document written as a TypeScript project's docs/typedoc.json."""
    doc_path = tmp_path / "docs" / "typedoc.json"
    doc_path.parent.mkdir()
    doc_path.write_text(json.dumps(sample_doc), encoding="utf-8")
    return doc_path
