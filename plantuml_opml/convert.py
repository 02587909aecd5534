"""Detect a document's format and convert it to the other one."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from . import config
from .detect import Format, decode_content, detect, read_source
from .exceptions import UnknownFormat
from .models import Document
from .plantuml import from_plantuml, to_plantuml
from .reader import from_opml
from .writer import to_opml

logger = logging.getLogger(__name__)


def load(content: Union[str, bytes]) -> tuple[Format, Document]:
    """Detect the format of `content` and parse it into a Document.

    Bytes are decoded as UTF-8 for detection and PlantUML parsing; OPML
    bytes go to the XML parser untouched so it can honour the declared
    encoding.

    Raises:
        UnknownFormat: If the content is neither format.
        MalformedDocument: If OPML content is not well-formed.
    """
    text = decode_content(content)

    fmt = detect(text)
    if fmt is Format.PLANTUML:
        return fmt, from_plantuml(text)
    if fmt is Format.OPML:
        return fmt, from_opml(content)
    raise UnknownFormat("Unknown file type.")


def load_file(path: Union[str, Path]) -> tuple[Format, Document]:
    """Read a .plantuml or .opml file into a Document."""
    return load(read_source(path))


def convert(content: Union[str, bytes]) -> tuple[Format, str]:
    """Convert PlantUML to OPML or OPML to PlantUML.

    Returns:
        The detected source format and the converted text.
    """
    fmt, document = load(content)
    if fmt is Format.PLANTUML:
        return fmt, to_opml(document)
    return fmt, to_plantuml(document)


def output_path(path: Union[str, Path], fmt: Format) -> Path:
    """Derive the output file name for a source of format `fmt`.

    `notes.plantuml` becomes `notes.opml` and vice versa. A source without
    the expected suffix keeps its name and gets the new suffix appended.
    """
    if fmt is Format.PLANTUML:
        source_suffix, target_suffix = config.PLANTUML_SUFFIX, config.OPML_SUFFIX
    elif fmt is Format.OPML:
        source_suffix, target_suffix = config.OPML_SUFFIX, config.PLANTUML_SUFFIX
    else:
        raise UnknownFormat(f"No output format for {fmt.value} input")

    name = str(path)
    if name.endswith(source_suffix):
        name = name[: -len(source_suffix)]
    return Path(name + target_suffix)


def convert_file(
    path: Union[str, Path], output: Optional[Union[str, Path]] = None
) -> tuple[Format, Path]:
    """Convert a file on disk, writing the result next to it.

    Nothing is written if detection or parsing fails.

    Args:
        path: Source .plantuml or .opml file.
        output: Explicit output path; derived from `path` when omitted.

    Returns:
        The detected source format and the path written to.
    """
    path = Path(path)
    fmt, result = convert(read_source(path))

    dest = Path(output) if output is not None else output_path(path, fmt)
    if not result.endswith("\n"):
        result += "\n"
    dest.write_text(result, encoding="utf-8")
    logger.info("Converted %s (%s) to %s", path, fmt.value, dest)
    return fmt, dest
