"""Group relative doc paths into a sorted two-level section tree.

Pure path arithmetic with zero I/O. A path ``top/file`` lands directly in
section ``top``; ``top/a/b/file`` lands in subsection ``a/b`` of ``top``.
Anything without a directory component is dropped.
"""
from __future__ import annotations

from collections.abc import Iterable

from docs_to_agent.doc_types import DocFile, Section, Subsection


def classify_path(relative_path: str) -> tuple[str, str | None, str] | None:
    """Split a relative path into ``(section, subsection, basename)``.

    ``subsection`` is ``None`` for files directly inside the section.
    Returns ``None`` when the path has fewer than two segments.
    """
    parts = relative_path.split("/")
    if len(parts) < 2:
        return None
    if len(parts) == 2:
        return parts[0], None, parts[1]
    return parts[0], "/".join(parts[1:-1]), parts[-1]


def build_doc_tree(files: Iterable[DocFile]) -> list[Section]:
    """Build the section tree for a set of doc files.

    Sections, subsections and every file list come back sorted by plain
    code-point order, so the result does not depend on input order.
    """
    # insertion-ordered: section -> (direct files, subsection -> files)
    accum: dict[str, tuple[list[str], dict[str, list[str]]]] = {}

    for doc in files:
        placed = classify_path(doc.relative_path)
        if placed is None:
            continue
        top, sub, basename = placed
        direct, children = accum.setdefault(top, ([], {}))
        if sub is None:
            direct.append(basename)
        else:
            children.setdefault(sub, []).append(basename)

    sections = [
        Section(
            name=name,
            files=tuple(sorted(direct)),
            subsections=tuple(
                Subsection(name=sub_name, files=tuple(sorted(sub_files)))
                for sub_name, sub_files in sorted(children.items())
            ),
        )
        for name, (direct, children) in accum.items()
    ]
    sections.sort(key=lambda s: s.name)
    return sections


def count_files(sections: Iterable[Section]) -> int:
    """Total number of files referenced by a section tree."""
    return sum(
        len(s.files) + sum(len(sub.files) for sub in s.subsections)
        for s in sections
    )
