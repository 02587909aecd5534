"""Classify raw content as PlantUML mindmap or OPML."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Union

from . import config
from .exceptions import UnreadableInput


class Format(Enum):
    """Supported document formats."""
    PLANTUML = "plantuml"
    OPML = "opml"
    UNKNOWN = "unknown"


def detect(content: str) -> Format:
    """Guess the format of `content`.

    The start delimiter wins over the OPML check, so text that opens with
    `@startmindmap` is PlantUML even if it also contains `<opml`.
    """
    if content.lstrip().startswith(config.START_DELIMITER):
        return Format.PLANTUML
    if config.OPML_OPEN_TOKEN in content:
        return Format.OPML
    return Format.UNKNOWN


def decode_content(content: Union[str, bytes]) -> str:
    """Decode raw file bytes as UTF-8, replacing undecodable bytes."""
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


def read_source(path: Union[str, Path]) -> bytes:
    """Read a source file's raw bytes."""
    path = Path(path)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise UnreadableInput(f"Cannot read {path}: {exc}") from exc


def detect_file(path: Union[str, Path]) -> Format:
    """Read a file and guess its format."""
    return detect(decode_content(read_source(path)))
