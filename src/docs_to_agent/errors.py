"""Exception hierarchy for the docs-to-agent tool.

The index core (tree building, rendering, injection) is total and raises
none of these; they come from URL parsing and the git-backed fetch.
"""
from __future__ import annotations


class DocsToAgentError(RuntimeError):
    """Base class for every error the CLI reports and exits on."""


class GitHubUrlError(DocsToAgentError, ValueError):
    """Raised when a GitHub URL cannot be parsed into owner/repo/branch/path."""


class GitCommandError(DocsToAgentError):
    """Raised when a ``git`` subprocess exits non-zero."""

    def __init__(self, command: list[str], returncode: int, stderr: str) -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"exit status {returncode}"
        super().__init__(f"git command failed ({' '.join(command)}): {detail}")


class DocsPathNotFoundError(DocsToAgentError):
    """Raised when the requested docs folder is absent from the cloned repo."""

    def __init__(self, docs_path: str) -> None:
        self.docs_path = docs_path
        super().__init__(
            f'Docs path "{docs_path}" not found in repo. Check the URL path.'
        )


class NoDocsFoundError(DocsToAgentError):
    """Raised when the downloaded folder contains no indexable documents."""
