from .types import Element, Node, ProcessingInstruction, Text, is_element
from .load import load_document, parse_xml

__all__ = [
    "Element",
    "Node",
    "ProcessingInstruction",
    "Text",
    "is_element",
    "load_document",
    "parse_xml",
]
