"""Core value types shared by the tree builder, index renderer and CLI.

All records are frozen, slotted dataclasses. Nothing here performs I/O.

Type hierarchy:
  DocFile          — One discovered document, as a path relative to the docs root
  Subsection       — Files sharing everything but the first and last path segment
  Section          — One top-level directory of the docs root
  GitHubUrl        — Parsed ``github.com/<owner>/<repo>/tree/<branch>/<path>``
  PullDocsResult   — Where docs were materialized and how many were found
  GitignoreResult  — Outcome of ensuring a ``.gitignore`` entry
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DocFile:
    """A document file; ``relative_path`` always uses ``/`` separators."""

    relative_path: str


@dataclass(frozen=True, slots=True)
class Subsection:
    """Files grouped under ``<section>/<name>``.

    ``name`` may span several directory levels (``guide/advanced``); deeper
    trees collapse into this one string instead of nesting further.
    """

    name: str
    files: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Section:
    """A top-level docs directory with its direct files and subsections."""

    name: str
    files: tuple[str, ...] = ()
    subsections: tuple[Subsection, ...] = ()


@dataclass(frozen=True, slots=True)
class GitHubUrl:
    owner: str
    repo: str
    branch: str
    docs_path: str


@dataclass(frozen=True, slots=True)
class PullDocsResult:
    """``local_docs_dir`` is relative to the working directory (POSIX form)."""

    local_docs_dir: str
    file_count: int


@dataclass(frozen=True, slots=True)
class GitignoreResult:
    path: Path
    updated: bool
    already_present: bool
