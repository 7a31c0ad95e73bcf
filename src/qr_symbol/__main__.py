"""Command line interface for encoding QR symbols."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .generator import symbol_to_dict
from .symbol import QRSymbol
from .tables import ErrorCorrectLevel


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Encode a payload as a QR module matrix (JSON)")
    data_group = parser.add_mutually_exclusive_group(required=True)
    data_group.add_argument("--text", help="Literal text/URL to encode")
    data_group.add_argument("--file", type=Path, help="Read the raw payload bytes from a file")

    parser.add_argument("-o", "--output", type=Path, help="Write the JSON here instead of stdout")
    parser.add_argument("--ecc", choices=["low", "medium", "quartile", "high"], default="medium", help="Error correction level")
    parser.add_argument("--encoding", default="utf-8", help="Text encoding used with --text")
    parser.add_argument("--version", type=int, help="Force a symbol version (1-40)")
    parser.add_argument("--mask", type=int, choices=range(8), help="Force a mask pattern")
    parser.add_argument("--border", type=int, default=0, help="Quiet-zone width in modules")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log version and mask selection")
    return parser


def encode_args(args: argparse.Namespace) -> QRSymbol:
    level = ErrorCorrectLevel.parse(args.ecc)
    if args.text is not None:
        return QRSymbol.encode_text(
            args.text, level, encoding=args.encoding, version=args.version, mask_pattern=args.mask
        )
    return QRSymbol.encode(args.file.read_bytes(), level, version=args.version, mask_pattern=args.mask)


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        symbol = encode_args(args)
        document = symbol_to_dict(symbol, args.border)
    except ValueError as exc:
        parser.error(str(exc))
    text = json.dumps(document, indent=2)
    if args.output is None:
        sys.stdout.write(text + "\n")
        return
    args.output.write_text(text + "\n", encoding="utf-8")
    parser.exit(0, f"Saved QR matrix to {args.output}\n")


if __name__ == "__main__":
    main()
