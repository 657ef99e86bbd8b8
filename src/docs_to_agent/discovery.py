"""Recursive discovery of markdown documents under a docs root."""
from __future__ import annotations

import re
from pathlib import Path

from docs_to_agent.doc_types import DocFile

DOC_FILE_RE = re.compile(r"\.(md|mdx)$", re.IGNORECASE)
# Root/landing pages carry no structure worth indexing.
INDEX_FILE_RE = re.compile(r"^index\.(md|mdx)$", re.IGNORECASE)


def is_doc_file(filename: str) -> bool:
    """True for ``.md``/``.mdx`` files other than ``index.md``/``index.mdx``."""
    return bool(DOC_FILE_RE.search(filename)) and not INDEX_FILE_RE.match(filename)


def collect_doc_files(root: Path) -> list[DocFile]:
    """Collect document files under ``root``, sorted by relative path.

    A missing ``root`` yields an empty list. Paths are POSIX-style relative
    to ``root`` regardless of platform.
    """
    files: list[DocFile] = []

    def walk(current: Path) -> None:
        if not current.is_dir():
            return
        for entry in sorted(current.iterdir()):
            if entry.is_dir() and not entry.is_symlink():
                walk(entry)
            elif is_doc_file(entry.name):
                files.append(DocFile(entry.relative_to(root).as_posix()))

    walk(root)
    files.sort(key=lambda f: f.relative_path)
    return files
