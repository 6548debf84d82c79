"""Writing, reading and copying files, with a small copy command."""

from __future__ import annotations

import shutil
import sys
from collections.abc import Sequence
from os import PathLike
from typing import TextIO

StrPath = str | PathLike[str]

_CHUNK = 64 * 1024


def write_stream(source: TextIO, path: StrPath) -> int:
    """Write everything read from source into path; return characters written."""
    written = 0
    with open(path, "w", encoding="utf-8") as target:
        while chunk := source.read(_CHUNK):
            target.write(chunk)
            written += len(chunk)
    return written


def read_file(path: StrPath) -> str:
    """Return the whole text of a file."""
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def copy_file(source: StrPath, target: StrPath) -> None:
    """Copy the bytes of source into target, replacing its contents."""
    with open(source, "rb") as src, open(target, "wb") as dst:
        shutil.copyfileobj(src, dst)


def main(argv: Sequence[str] | None = None) -> int:
    """Copy one file to another: arguments are SOURCE TARGET."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Invalid number of arguments.", file=sys.stderr)
        return 1
    source, target = args
    try:
        src = open(source, "rb")
    except OSError:
        print("Source file cannot be opened.", file=sys.stderr)
        return 1
    with src:
        try:
            dst = open(target, "wb")
        except OSError:
            print("Target file cannot be opened.", file=sys.stderr)
            return 1
        with dst:
            shutil.copyfileobj(src, dst)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())