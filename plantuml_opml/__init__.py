"""plantuml-opml: Convert between PlantUML mindmaps and OPML outlines.

A pure Python library; both formats share one in-memory tree.

Usage:
    import plantuml_opml

    # Parse a PlantUML mindmap
    doc = plantuml_opml.from_plantuml(open("ideas.plantuml").read())
    print(doc)  # Document('Converted Mindmap', 12 nodes)

    # Navigate the tree
    for node in doc.outlines:
        print(node.label, len(node.children))

    # Export to OPML and back
    xml = plantuml_opml.to_opml(doc)
    doc2 = plantuml_opml.from_opml(xml)
    text = plantuml_opml.to_plantuml(doc2)

    # Or let the format be detected
    fmt, result = plantuml_opml.convert(text)
"""

__version__ = "0.1.0"

from .reader import read, from_opml
from .writer import write, to_opml
from .plantuml import from_plantuml, to_plantuml
from .detect import Format, decode_content, detect, detect_file
from .convert import convert, convert_file, load, load_file, output_path
from .models import Document, Node
from .exceptions import ConversionError, MalformedDocument, UnknownFormat, UnreadableInput

__all__ = [
    "read",
    "write",
    "from_opml",
    "to_opml",
    "from_plantuml",
    "to_plantuml",
    "detect",
    "detect_file",
    "convert",
    "convert_file",
    "load",
    "load_file",
    "decode_content",
    "output_path",
    "Format",
    "Document",
    "Node",
    "ConversionError",
    "MalformedDocument",
    "UnknownFormat",
    "UnreadableInput",
]
