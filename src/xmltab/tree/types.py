from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class Text:
    value: str


@dataclass(frozen=True)
class ProcessingInstruction:
    target: str
    data: Optional[str] = None


@dataclass(frozen=True)
class Element:
    """
    Read-only XML element.

    ``children`` holds every direct child node in document order, text
    included: ``<item>hi</item>`` has one child, ``Text("hi")``.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: Tuple["Node", ...] = ()

    def get_child(self, tag: str) -> Optional["Element"]:
        """First direct child element with ``tag``; later siblings are never seen."""
        for child in self.children:
            if isinstance(child, Element) and child.tag == tag:
                return child
        return None

    def child_at(self, index: int) -> Optional["Node"]:
        if 0 <= index < len(self.children):
            return self.children[index]
        return None

    def get_text(self) -> Optional[str]:
        """Concatenated direct text children, or None when there are none."""
        texts = [c.value for c in self.children if isinstance(c, Text)]
        if not texts:
            return None
        return "".join(texts)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    @property
    def child_count(self) -> int:
        return len(self.children)


Node = Union[Element, Text, ProcessingInstruction]


def is_element(node: Optional[Node]) -> bool:
    return isinstance(node, Element)
