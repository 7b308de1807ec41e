"""
Document source - reads a TypeDoc JSON file in one blocking call.

The index never touches the filesystem; everything it ingests comes
through here.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import xxhash

from .errors import LoadFailure

logger = logging.getLogger(__name__)

# Where TypeDoc output usually lands inside a project, in lookup order
DOC_CANDIDATES = (
    Path("docs") / "typedoc.json",
    Path("documentation") / "typedoc.json",
    Path("typedoc.json"),
)


class JsonDocumentSource:
    """TypeDoc JSON file on disk."""

    def __init__(self, doc_path: Union[str, Path]):
        self.doc_path = Path(doc_path)
        self.fingerprint: Optional[str] = None

    def read(self) -> Dict[str, Any]:
        """Return the decoded root reflection of the document."""
        try:
            raw = self.doc_path.read_bytes()
        except OSError as e:
            raise LoadFailure(f"Cannot read {self.doc_path}: {e}") from e

        try:
            root = json.loads(raw)
        except (ValueError, UnicodeDecodeError) as e:
            raise LoadFailure(f"Invalid TypeDoc JSON in {self.doc_path}: {e}") from e
        except RecursionError as e:
            raise LoadFailure(f"TypeDoc JSON in {self.doc_path} is nested too deeply to decode") from e

        # xxh3 digest of exactly the bytes that were decoded
        self.fingerprint = xxhash.xxh3_64(raw).hexdigest()
        logger.debug("Read %d bytes from %s (xxh3=%s)", len(raw), self.doc_path, self.fingerprint)
        return root

    def __repr__(self) -> str:
        return f"JsonDocumentSource({str(self.doc_path)!r})"


def discover_doc_path(project_path: Union[str, Path]) -> Optional[Path]:
    """First TypeDoc JSON found under a project directory, or None."""
    base = Path(project_path)
    for candidate in DOC_CANDIDATES:
        doc_path = base / candidate
        if doc_path.is_file():
            logger.info("Found documentation at %s", doc_path)
            return doc_path
    return None
