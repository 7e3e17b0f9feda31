#!/usr/bin/env python
"""Print the raw token dump of a muil file."""

from __future__ import annotations

import argparse
from pathlib import Path

from muilpy.lexer import dump_tokens, tokenize


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump muil tokens")
    parser.add_argument("path", type=Path, help="Path to a .muil file")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the dump to this file instead of stdout",
    )
    args = parser.parse_args()

    input_path: Path = args.path
    if not input_path.is_file():
        raise SystemExit(f"Invalid path: {input_path}")

    stream = tokenize(input_path.read_bytes())
    text = dump_tokens(stream)

    if args.output is None:
        print(text, end="")
        return 0

    output_path: Path = args.output
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    print(f"Wrote {len(stream)} tokens to {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
