"""
Materialize XML documents into the read-only ``Element`` tree.

Conversion rules:
  - tags and attribute names are reduced to their local name
  - comments are dropped, their tail text is kept
  - whitespace-only text runs are dropped; other text is kept as written
  - adjacent text runs (split by a dropped comment or an unresolved entity
    reference) are merged into one text node
  - CDATA is folded into text
  - processing instructions stay as child nodes
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from lxml import etree

from xmltab.errors import DocumentError
from xmltab.tree.types import Element, Node, ProcessingInstruction, Text


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        strip_cdata=True,
    )


def _local(name: str) -> str:
    return etree.QName(name).localname


def _append_text(children: List[Node], s: Optional[str]) -> None:
    if s is None or not s.strip():
        return
    if children and isinstance(children[-1], Text):
        children[-1] = Text(children[-1].value + s)
    else:
        children.append(Text(s))


def _convert(el) -> Element:
    children: List[Node] = []

    _append_text(children, el.text)

    for child in el:
        if child.tag is etree.Comment:
            pass
        elif child.tag is etree.PI:
            children.append(ProcessingInstruction(child.target, child.text))
        elif child.tag is etree.Entity:
            # unresolved entity reference, kept verbatim as text
            _append_text(children, child.text)
        else:
            children.append(_convert(child))

        _append_text(children, child.tail)

    attributes = {_local(k): v for k, v in el.attrib.items()}
    return Element(tag=_local(el.tag), attributes=attributes, children=tuple(children))


def parse_xml(source: Union[str, bytes], doc_identity: str = "<string>") -> Element:
    """Parse an in-memory XML document and return its root element."""
    if isinstance(source, str):
        source = source.encode("utf-8")
    try:
        root = etree.fromstring(source, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        raise DocumentError(doc_identity, str(e)) from e
    return _convert(root)


def load_document(path: Path) -> Element:
    """Read and parse one XML file into memory."""
    path = Path(path)
    try:
        tree = etree.parse(str(path), parser=_make_parser())
    except OSError as e:
        raise DocumentError(str(path), f"cannot open file ({e})") from e
    except etree.XMLSyntaxError as e:
        raise DocumentError(str(path), str(e)) from e
    return _convert(tree.getroot())
