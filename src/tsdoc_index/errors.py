"""Documentation index errors."""


class DocIndexError(Exception):
    """Base class for documentation index failures."""


class LoadFailure(DocIndexError):
    """The document is missing, unreadable, or not a well-formed symbol tree."""


class NotLoadedError(DocIndexError):
    """A query ran before any document was successfully loaded."""

    def __init__(self, message: str = "Documentation not loaded"):
        super().__init__(message)
