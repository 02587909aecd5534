"""Tests for OPML reading and writing."""

import xml.etree.ElementTree as ET

import pytest

import plantuml_opml
from plantuml_opml import Document, MalformedDocument, UnreadableInput, from_opml, to_opml


SAMPLE = """<?xml version="1.0" encoding="UTF-8"?>
<opml version="2.0">
  <head>
    <title>Reading list</title>
  </head>
  <body>
    <outline text="Books">
      <outline text="Fiction" />
      <outline text="Essays">
        <outline text="Montaigne" />
      </outline>
    </outline>
    <outline text="Papers" />
  </body>
</opml>"""


def _sample_document() -> Document:
    doc = Document()
    books = doc.add_outline("Books")
    books.add_child("Fiction")
    books.add_child("Essays").add_child("Montaigne")
    doc.add_outline("Papers")
    return doc


def test_read_structure():
    doc = from_opml(SAMPLE)

    assert doc.version == "2.0"
    assert doc.title == "Reading list"
    assert [n.label for n in doc.outlines] == ["Books", "Papers"]
    assert doc.find("Montaigne").path == ["Books", "Essays", "Montaigne"]
    assert doc.node_count == 5


def test_read_bytes():
    doc = from_opml(SAMPLE.encode("utf-8"))

    assert doc.find("Essays") is not None


def test_missing_text_is_empty_label():
    doc = from_opml('<opml version="2.0"><body><outline><outline text="x"/></outline></body></opml>')

    assert doc.outlines[0].label == ""
    assert doc.outlines[0].children[0].label == "x"


def test_non_outline_elements_are_ignored():
    xml = (
        '<opml version="2.0"><head><title>t</title></head><body>'
        '<note text="skip"/>'
        '<outline text="keep"><extra/><outline text="child"/></outline>'
        "</body></opml>"
    )
    doc = from_opml(xml)

    assert [n.label for n in doc.walk()] == ["keep", "child"]


def test_missing_head_and_body():
    doc = from_opml("<opml/>")

    assert doc.version == ""
    assert doc.title == ""
    assert doc.outlines == []


def test_malformed_xml_raises():
    with pytest.raises(MalformedDocument):
        from_opml('<opml version="2.0"><body><outline text="a"></body></opml>')


def test_wrong_document_element_raises():
    with pytest.raises(MalformedDocument):
        from_opml("<html><body/></html>")


def test_write_format():
    xml = to_opml(_sample_document(), xml_declaration=False)

    assert xml.startswith('<opml version="2.0">\n  <head>\n    <title>Converted Mindmap</title>')
    assert '\n    <outline text="Books">\n      <outline text="Fiction" />' in xml
    assert '\n        <outline text="Montaigne" />' in xml


def test_write_declaration():
    xml = to_opml(Document())

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<opml')


def test_empty_document_has_no_outlines():
    root = ET.fromstring(to_opml(Document()))

    assert root.find("body") is not None
    assert root.findall("body/outline") == []


def test_roundtrip_preserves_tree():
    doc = _sample_document()

    assert from_opml(to_opml(doc)).outlines == doc.outlines


def test_escaping_roundtrip():
    label = 'Tom & Jerry <"cartoon"> > all'
    doc = Document()
    doc.add_outline(label).add_child("a&b")

    xml = to_opml(doc)
    assert "&amp;" in xml
    assert "&lt;" in xml
    assert "&quot;" in xml

    doc2 = from_opml(xml)
    assert doc2.outlines[0].label == label
    assert doc2.outlines[0].children[0].label == "a&b"


def test_write_and_read_file(tmp_path):
    path = tmp_path / "reading.opml"

    written = plantuml_opml.write(_sample_document(), path)
    assert written == path

    doc = plantuml_opml.read(path)
    assert doc.title == "Converted Mindmap"
    assert doc.outlines == _sample_document().outlines


def test_read_missing_file(tmp_path):
    with pytest.raises(UnreadableInput):
        plantuml_opml.read(tmp_path / "missing.opml")


SJIS_OPML = (
    b'<?xml version="1.0" encoding="Shift_JIS"?>'
    b'<opml version="2.0"><body><outline text="a"/></body></opml>'
)


def test_unsupported_declared_encoding_raises():
    with pytest.raises(MalformedDocument):
        from_opml(SJIS_OPML)


def test_unknown_declared_encoding_raises():
    with pytest.raises(MalformedDocument):
        from_opml(b'<?xml version="1.0" encoding="bogus-enc"?><opml version="2.0"/>')


def test_title_is_read_verbatim():
    doc = from_opml('<opml version="2.0"><head><title>  Spaced  </title></head></opml>')

    assert doc.title == "  Spaced  "
