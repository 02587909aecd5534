"""Custom exceptions for plantuml-opml."""


class ConversionError(Exception):
    """Base exception for plantuml-opml operations."""


class MalformedDocument(ConversionError):
    """OPML input is not well-formed XML or has the wrong document element."""


class UnreadableInput(ConversionError):
    """Source file could not be read."""


class UnknownFormat(ConversionError):
    """Content is neither a PlantUML mindmap nor an OPML document."""
