"""Read OPML documents into Python objects."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from . import config
from .exceptions import MalformedDocument, UnreadableInput
from .models import Document, Node

logger = logging.getLogger(__name__)


def read(path: Union[str, Path]) -> Document:
    """Read an .opml file and return a Document.

    Args:
        path: Path to the .opml file.

    Returns:
        A Document with the full outline tree.

    Raises:
        UnreadableInput: If the file can't be read.
        MalformedDocument: If the file isn't well-formed OPML.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise UnreadableInput(f"Cannot read {path}: {exc}") from exc

    return from_opml(data)


def from_opml(content: Union[str, bytes]) -> Document:
    """Parse OPML text into a Document.

    Only `outline` elements under `body` are taken into the tree; any
    other element is ignored. An outline without a `text` attribute gets
    an empty label.

    Raises:
        MalformedDocument: If the XML is not well-formed, declares an
            encoding expat can't decode, or the document element is not
            `opml`.
    """
    try:
        root_elem = ET.fromstring(content)
    # expat raises ValueError for multi-byte declared encodings and
    # LookupError for unknown ones
    except (ET.ParseError, ValueError, LookupError) as exc:
        raise MalformedDocument(f"Invalid OPML: {exc}") from exc

    if root_elem.tag != config.OPML_ROOT_TAG:
        raise MalformedDocument(
            f"Expected <{config.OPML_ROOT_TAG}> document element, got <{root_elem.tag}>"
        )

    document = Document(version=root_elem.get("version", ""), title="")

    title_elem = root_elem.find("head/title")
    if title_elem is not None and title_elem.text:
        document.title = title_elem.text

    body = root_elem.find("body")
    if body is not None:
        for outline_elem in body.findall("outline"):
            document.outlines.append(_parse_outline(outline_elem, parent=None))

    logger.debug("Parsed %d nodes from OPML", document.node_count)
    return document


def _parse_outline(elem: ET.Element, parent: Node | None) -> Node:
    """Recursively parse an outline element into a Node."""
    node = Node(label=elem.get("text", ""), parent=parent)

    for child_elem in elem.findall("outline"):
        node.children.append(_parse_outline(child_elem, parent=node))

    return node
