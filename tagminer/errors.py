class TagMinerError(Exception):
    """Base class for all tagminer errors."""


class MissingResourceError(TagMinerError, FileNotFoundError):
    """A required file or directory does not exist."""

    def __init__(self, path, message: str = None):
        self.path = path
        super().__init__(message or f"No such file or directory: {path}")


class MalformedContentError(TagMinerError, ValueError):
    """A data file does not hold well-formed JSON.

    Only raised when strict validation is enabled; otherwise the sanitizer
    replaces the document with an empty object.
    """

    def __init__(self, source, reason: str = ""):
        self.source = source
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid json file {source}{detail}")


class AggregationInvariantError(TagMinerError, ValueError):
    """The joined document array failed to parse after sanitization."""
