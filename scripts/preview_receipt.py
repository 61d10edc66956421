#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Preview a receipt description without a printer.

Prints the laid-out lines as they would appear on paper, followed by a hex
dump of the ESC/POS bytes.

Usage:
    python scripts/preview_receipt.py receipt.json
    python scripts/preview_receipt.py receipt.json --width 48
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from thermal_receipt import (
    LineKind,
    ReceiptError,
    build_layout,
    describe_bytes,
    get_logger,
    load_config,
)

logger = get_logger(__name__)


def print_banner(text: str) -> None:
    """Print section banner."""
    print()
    print("=" * 70)
    print(f"  {text}")
    print("=" * 70)


def preview(description: str, chars_per_line: int) -> None:
    lines = build_layout(description, default_chars_per_line=chars_per_line)

    print_banner(f"Paper preview ({len(lines)} lines)")
    for line in lines:
        if line.kind is LineKind.PAPERCUT:
            print("- - - - - - 8< - - - - - -")
        elif line.kind is LineKind.LINEFEED:
            print("|")
        else:
            marks = ("B" if line.style.bold else " ") + ("U" if line.style.underline else " ")
            print(f"|{line.text}| {marks}")

    print_banner("ESC/POS bytes")
    print(describe_bytes(description, default_chars_per_line=chars_per_line))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Preview a JSON receipt description")
    parser.add_argument("path", type=Path, help="receipt description (JSON)")
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="charsPerLine used when the description has no config",
    )
    parser.add_argument(
        "--config", type=Path, default=None, help="receipt_config.json to load"
    )
    args = parser.parse_args(argv)

    config = load_config(args.config)
    width = args.width if args.width is not None else config["chars_per_line"]

    try:
        description = args.path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Cannot read %s: %s", args.path, e)
        return 1

    try:
        preview(description, width)
    except ReceiptError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
