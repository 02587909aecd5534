"""Format constants and environment-driven defaults for plantuml-opml."""

from __future__ import annotations

import os


# PlantUML mindmap notation
MARKER = "*"
START_DELIMITER = "@startmindmap"
END_DELIMITER = "@endmindmap"
# Any @start.../@end... line is a delimiter when parsing
DELIMITER_PREFIXES = ("@start", "@end")

# OPML outline notation
OPML_VERSION = "2.0"
OPML_ROOT_TAG = "opml"
OPML_OPEN_TOKEN = f"<{OPML_ROOT_TAG}"
INDENT = "  "
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

PLANTUML_SUFFIX = ".plantuml"
OPML_SUFFIX = ".opml"

DEFAULT_DOCUMENT_TITLE = "Converted Mindmap"
DEFAULT_LOG_LEVEL = "INFO"

DEFAULT_TITLE = os.getenv("PLANTUML_OPML_TITLE", DEFAULT_DOCUMENT_TITLE)
LOG_LEVEL = os.getenv("PLANTUML_OPML_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
