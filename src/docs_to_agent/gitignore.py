"""Keep a directory listed in a project's ``.gitignore``."""
from __future__ import annotations

from pathlib import Path

from docs_to_agent.doc_types import GitignoreResult
from docs_to_agent.io_utils import read_text_or_empty, write_text


def ensure_gitignore_entry(cwd: Path, dir_name: str) -> GitignoreResult:
    """Append ``<dir_name>/`` to ``cwd/.gitignore`` unless already listed.

    Either ``dir_name`` or ``dir_name/`` on its own line counts as present.
    """
    gitignore_path = cwd / ".gitignore"
    entry = f"{dir_name}/"

    if not gitignore_path.exists():
        write_text(gitignore_path, f"{entry}\n")
        return GitignoreResult(path=gitignore_path, updated=True, already_present=False)

    content = read_text_or_empty(gitignore_path)
    if any(line.strip() in (entry, dir_name) for line in content.split("\n")):
        return GitignoreResult(path=gitignore_path, updated=False, already_present=True)

    separator = "" if not content or content.endswith("\n") else "\n"
    write_text(gitignore_path, f"{content}{separator}{entry}\n")
    return GitignoreResult(path=gitignore_path, updated=True, already_present=False)
