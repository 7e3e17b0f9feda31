#!/usr/bin/env python
"""Parse a muil file and print its AST dump plus diagnostics."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from muilpy.ast import print_program
from muilpy.diagnostics import format_diagnostic
from muilpy.parser import ParseMode, parse_result


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump the muil AST of a file")
    parser.add_argument("path", type=Path, help="Path to a .muil file")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ParseMode],
        default=ParseMode.PERMISSIVE.value,
        help="Parse mode (default: permissive)",
    )
    parser.add_argument("--extends", action="store_true", help="Include extends clauses in the dump")
    parser.add_argument("--json", action="store_true", help="Print the nested JSON dump instead")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parser recovery steps")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    input_path: Path = args.path
    if not input_path.is_file():
        raise SystemExit(f"Invalid path: {input_path}")

    result = parse_result(input_path.read_text(encoding="utf-8"), mode=ParseMode(args.mode))
    if args.json:
        print(result.json_dump())
    else:
        print(print_program(result.program(), include_extends=args.extends), end="")

    for diagnostic in result.diagnostics:
        print(format_diagnostic(diagnostic))

    return 1 if result.has_errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
