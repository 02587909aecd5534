"""Command-line interface for plantuml-opml."""

from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .convert import convert_file, load_file
from .detect import Format, detect_file
from .exceptions import ConversionError


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="plantuml-opml",
        description="Convert between PlantUML mindmaps and OPML outlines",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    # --- convert ---
    p_convert = sub.add_parser("convert", help="Convert a file to the other format")
    p_convert.add_argument("file", help="Path to .plantuml or .opml file")
    p_convert.add_argument("-o", "--output", help="Output file (default: derived from input name)")

    # --- detect ---
    p_detect = sub.add_parser("detect", help="Print the detected format")
    p_detect.add_argument("file", help="Path to file")

    # --- tree ---
    p_tree = sub.add_parser("tree", help="Print the outline tree")
    p_tree.add_argument("file", help="Path to .plantuml or .opml file")
    p_tree.add_argument("--depth", type=int, default=99, help="Max depth")
    p_tree.add_argument("--root", help="Only print the subtree under the first node with this label")

    # --- find ---
    p_find = sub.add_parser("find", help="Search for nodes by label")
    p_find.add_argument("file", help="Path to .plantuml or .opml file")
    p_find.add_argument("label", help="Label to search for (case-insensitive)")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.command == "convert":
            cmd_convert(args)
        elif args.command == "detect":
            cmd_detect(args)
        elif args.command == "tree":
            cmd_tree(args)
        elif args.command == "find":
            return cmd_find(args)
    except (ConversionError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def cmd_convert(args):
    fmt, dest = convert_file(args.file, args.output)
    if fmt is Format.PLANTUML:
        print(f"Converted PlantUML to OPML: {dest}")
    else:
        print(f"Converted OPML to PlantUML: {dest}")


def cmd_detect(args):
    print(detect_file(args.file).value)


def cmd_tree(args):
    _, document = load_file(args.file)

    if args.root is not None:
        top = document.find(args.root)
        if top is None:
            raise ConversionError(f"No node labelled {args.root!r}")
        nodes = top.walk()
        base = top.depth
    else:
        print(f"{document.title} ({document.node_count} nodes)")
        nodes = document.walk()
        base = 1

    for node in nodes:
        level = node.depth - base
        if level >= args.depth:
            continue
        print("  " * level + node.label)


def cmd_find(args):
    _, document = load_file(args.file)

    matches = document.find_all(args.label)
    for node in matches:
        print(" → ".join(node.path))
    return 0 if matches else 1


if __name__ == "__main__":
    sys.exit(main())
