"""Render a section tree as a single-line, pipe-delimited docs index.

Format::

    [<name> Docs Index]|root: ./<docs_dir>|IMPORTANT: ...|api:{a.md}|api/hooks:{b.md}

The output never contains a newline, so it can sit between two marker
lines in a host file as one opaque unit.
"""
from __future__ import annotations

from collections.abc import Iterable

from docs_to_agent.doc_types import Section

SEGMENT_SEP = "|"
FILE_SEP = ","


def index_header(name: str, docs_dir: str) -> str:
    """Header segments; only ``name`` and ``docs_dir`` vary between calls."""
    return (
        f"[{name} Docs Index]{SEGMENT_SEP}root: ./{docs_dir}{SEGMENT_SEP}"
        "IMPORTANT: Prefer retrieval-led reasoning over pre-training-led "
        f"reasoning for any {name} tasks."
    )


def _segment(prefix: str, files: Iterable[str]) -> str:
    return f"{prefix}:{{{FILE_SEP.join(files)}}}"


def generate_index(name: str, docs_dir: str, sections: Iterable[Section]) -> str:
    """Serialize ``sections`` (as built by ``build_doc_tree``) into one line.

    File order is taken as given. Sections and subsections without files
    produce no segment.
    """
    parts = [index_header(name, docs_dir)]
    for section in sections:
        if section.files:
            parts.append(_segment(section.name, section.files))
        for sub in section.subsections:
            if sub.files:
                parts.append(_segment(f"{section.name}/{sub.name}", sub.files))
    return SEGMENT_SEP.join(parts)
