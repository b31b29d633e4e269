from __future__ import annotations

from typing import Sequence

from xmltab.errors import (
    AttributeNotFound,
    EmptyPath,
    IndexOutOfRange,
    IndexUsedAsAttributeName,
    NodeNotFound,
    NoTextContent,
    NotAnElement,
)
from xmltab.paths.types import ElementName, Index, PathExpression, PathMode, PathSegment
from xmltab.tree.types import Element, is_element


def _traversal_prefix(path: PathExpression, mode: PathMode) -> Sequence[PathSegment]:
    """Segments that are walked; for ATTR the last one names the attribute."""
    if mode is PathMode.ATTR:
        return path.segments[:-1]
    return path.segments


def _step(element: Element, segment: PathSegment, path: PathExpression) -> Element:
    if isinstance(segment, ElementName):
        child = element.get_child(segment.name)
        if child is None:
            raise NodeNotFound(segment.name, str(path))
        return child

    node = element.child_at(segment.value)
    if node is None:
        raise IndexOutOfRange(segment.value)
    if not is_element(node):
        raise NotAnElement(segment.value)
    return node


def extract(root: Element, path: PathExpression, mode: PathMode) -> str:
    """
    Walk ``path`` from ``root`` and read a value according to ``mode``.

      TEXT  -> concatenated direct text of the reached element
      LEN   -> number of direct children (all node kinds) of the reached element
      ATTR  -> value of the attribute named by the last segment

    Raises an ExtractionError subclass on failure.
    """
    if not path.segments:
        raise EmptyPath()

    if mode is PathMode.ATTR and isinstance(path.last, Index):
        raise IndexUsedAsAttributeName(str(path))

    element = root
    for segment in _traversal_prefix(path, mode):
        element = _step(element, segment, path)

    if mode is PathMode.TEXT:
        text = element.get_text()
        if text is None:
            raise NoTextContent(str(path))
        return text

    if mode is PathMode.LEN:
        return str(element.child_count)

    name = path.last.name
    value = element.get_attribute(name)
    if value is None:
        raise AttributeNotFound(name, str(path))
    return value
