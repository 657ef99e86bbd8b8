"""Text and JSON I/O helpers for host documents and CLI output.

Host files are read and written as UTF-8 with newlines passed through
untouched, so injection round-trips bytes outside the managed block.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, BinaryIO

import orjson


def read_text_or_empty(path: Path) -> str:
    """Return the file's text, or ``""`` when it does not exist yet."""
    if not path.exists():
        return ""
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: Path, text: str) -> None:
    """Write ``text`` verbatim, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def dumps_json(obj: Any, *, pretty: bool = True) -> bytes:
    """Serialize with orjson using sorted keys (indented when ``pretty``)."""
    opts = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS if pretty else orjson.OPT_SORT_KEYS
    return orjson.dumps(obj, option=opts, default=str)


def dump_json(obj: Any, stream: BinaryIO | None = None) -> None:
    """Write ``obj`` as JSON plus a newline to ``stream`` (default stdout)."""
    out = stream if stream is not None else sys.stdout.buffer
    out.write(dumps_json(obj))
    out.write(b"\n")
    out.flush()
