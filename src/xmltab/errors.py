from __future__ import annotations

from typing import Optional


class XmlTabError(Exception):
    """Base class for every error raised by xmltab."""


class PathSyntaxError(XmlTabError):
    """Reserved for stricter path grammars. Path parsing is currently total."""


class ConfigError(XmlTabError):
    """The column config could not be read or is invalid."""


class DocumentError(XmlTabError):
    """An input document could not be read or parsed as XML."""

    def __init__(self, doc_identity: str, reason: str) -> None:
        super().__init__(doc_identity, reason)
        self.doc_identity = doc_identity
        self.reason = reason

    def __str__(self) -> str:
        return f"Failed to parse xml file '{self.doc_identity}': {self.reason}"


# ---------------------------------------------------------------------------
# Extraction failures
#
# Constructor arguments are passed through to Exception so instances pickle
# cleanly across worker processes.
# ---------------------------------------------------------------------------

class ExtractionError(XmlTabError):
    """A path could not be evaluated against a document tree."""


class NodeNotFound(ExtractionError):
    def __init__(self, name: str, path: str) -> None:
        super().__init__(name, path)
        self.name = name
        self.path = path

    def __str__(self) -> str:
        return f"Cannot find node: {self.name} from xml path: {self.path}"


class IndexOutOfRange(ExtractionError):
    def __init__(self, index: int) -> None:
        super().__init__(index)
        self.index = index

    def __str__(self) -> str:
        return f"Cannot get child node: {self.index}"


class NotAnElement(ExtractionError):
    def __init__(self, index: int) -> None:
        super().__init__(index)
        self.index = index

    def __str__(self) -> str:
        return f"The item at the index: {self.index} is not an element"


class NoTextContent(ExtractionError):
    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"Failed to get text from {self.path}"


class AttributeNotFound(ExtractionError):
    def __init__(self, name: str, path: str) -> None:
        super().__init__(name, path)
        self.name = name
        self.path = path

    def __str__(self) -> str:
        return f"Failed to get attribute '{self.name}' from path: {self.path}"


class IndexUsedAsAttributeName(ExtractionError):
    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"Cannot use an index for attributes: {self.path}"


class EmptyPath(ExtractionError):
    def __str__(self) -> str:
        return "Paths need at least one part"


# ---------------------------------------------------------------------------
# Column resolution
# ---------------------------------------------------------------------------

class ResolveError(XmlTabError):
    """An extraction failed for a column that has no default."""

    def __init__(
        self,
        column_title: str,
        doc_identity: str,
        cause: Optional[ExtractionError] = None,
    ) -> None:
        super().__init__(column_title, doc_identity, cause)
        self.column_title = column_title
        self.doc_identity = doc_identity
        self.cause = cause

    def __str__(self) -> str:
        return (
            f"Failed to extract column '{self.column_title}' "
            f"from xml file '{self.doc_identity}': {self.cause}"
        )
