"""Write Document objects as OPML."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from . import config
from .models import Document, Node

logger = logging.getLogger(__name__)


def to_opml(document: Document, *, xml_declaration: bool = True) -> str:
    """Serialize a Document to a pretty-printed OPML string.

    Attribute values are escaped by ElementTree, so labels containing
    `&`, `<`, `>` or `"` survive a round trip through `from_opml`.

    Args:
        document: The Document to serialize.
        xml_declaration: Whether to prefix the XML declaration.

    Returns:
        OPML text indented two spaces per level.
    """
    root_elem = ET.Element(config.OPML_ROOT_TAG)
    root_elem.set("version", document.version)

    head = ET.SubElement(root_elem, "head")
    title = ET.SubElement(head, "title")
    title.text = document.title

    body = ET.SubElement(root_elem, "body")
    for node in document.outlines:
        body.append(_build_outline_elem(node))

    ET.indent(root_elem, space=config.INDENT)
    xml_str = ET.tostring(root_elem, encoding="unicode")

    if xml_declaration:
        return f"{config.XML_DECLARATION}\n{xml_str}"
    return xml_str


def write(document: Document, path: Union[str, Path]) -> Path:
    """Write a Document to an OPML file.

    Returns:
        The path written to.
    """
    path = Path(path)
    path.write_text(to_opml(document) + "\n", encoding="utf-8")
    logger.info("Wrote %d nodes to %s", document.node_count, path)
    return path


def _build_outline_elem(node: Node) -> ET.Element:
    """Build an outline Element from a Node, recursively."""
    elem = ET.Element("outline")
    elem.set("text", node.label)

    for child in node.children:
        elem.append(_build_outline_elem(child))

    return elem
