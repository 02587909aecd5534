"""Convert between Document objects and PlantUML mindmap text.

PlantUML format uses:
- `@startmindmap` / `@endmindmap` delimiter lines
- A run of `*` markers at line start for the nesting level
- The rest of the line, trimmed, as the label
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from . import config
from .models import Document, Node

logger = logging.getLogger(__name__)


def from_plantuml(text: str, *, title: Optional[str] = None) -> Document:
    """Parse PlantUML mindmap text into a Document.

    This is a best-effort parser and never fails. A line whose marker run
    skips levels (e.g. `***` right after `*`) is attached to the deepest
    open node instead of being rejected.

    Args:
        text: PlantUML mindmap text.
        title: Document title; defaults to the configured title.

    Returns:
        A Document with default OPML metadata.
    """
    root = Node()
    stack: list[Node] = [root]  # stack[0] is the synthetic root

    # Only "\n" ends a line; strip() drops the "\r" of CRLF input and any
    # other separator character stays part of its label.
    for lineno, raw in enumerate(text.split("\n"), start=1):
        line = raw.strip()
        if not line or line.startswith(config.DELIMITER_PREFIXES):
            continue

        level = len(line) - len(line.lstrip(config.MARKER))
        if level == 0:
            logger.debug("Skipping line %d without markers: %r", lineno, line)
            continue

        label = line[level:].strip()

        # Truncating is a no-op when the level skips past the deepest open
        # node, so the new node lands under it.
        del stack[level:]
        stack.append(stack[-1].add_child(label))

    # The synthetic root is never part of the result
    for node in root.children:
        node.parent = None

    document = Document(outlines=root.children)
    if title is not None:
        document.title = title
    logger.debug("Parsed %d nodes from PlantUML", document.node_count)
    return document


def to_plantuml(document: Union[Document, Iterable[Node]]) -> str:
    """Export a Document (or its top-level nodes) to PlantUML mindmap text.

    Returns:
        PlantUML string, without a trailing newline.
    """
    outlines = document.outlines if isinstance(document, Document) else document

    lines = [config.START_DELIMITER]
    for node in outlines:
        _node_to_plantuml(node, lines, level=1)
    lines.append(config.END_DELIMITER)

    return "\n".join(lines)


def _node_to_plantuml(node: Node, lines: list[str], level: int) -> None:
    """Recursively render a node and its children as marker lines."""
    lines.append(f"{config.MARKER * level} {node.label}")
    for child in node.children:
        _node_to_plantuml(child, lines, level + 1)
