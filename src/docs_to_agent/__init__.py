"""Compact docs indexes for AI coding agents, kept in keyed marker blocks."""
from __future__ import annotations

from docs_to_agent.discovery import collect_doc_files
from docs_to_agent.doc_tree import build_doc_tree, classify_path
from docs_to_agent.doc_types import (
    DocFile,
    GitHubUrl,
    GitignoreResult,
    PullDocsResult,
    Section,
    Subsection,
)
from docs_to_agent.errors import (
    DocsPathNotFoundError,
    DocsToAgentError,
    GitCommandError,
    GitHubUrlError,
    NoDocsFoundError,
)
from docs_to_agent.github_source import (
    DOCS_BASE_DIR,
    clone_docs_folder,
    parse_github_url,
    pull_docs,
    repo_key,
)
from docs_to_agent.gitignore import ensure_gitignore_entry
from docs_to_agent.index_format import generate_index
from docs_to_agent.inject import inject_into_file, marker_end, marker_start

__all__ = [
    "DOCS_BASE_DIR",
    "DocFile",
    "DocsPathNotFoundError",
    "DocsToAgentError",
    "GitCommandError",
    "GitHubUrl",
    "GitHubUrlError",
    "GitignoreResult",
    "NoDocsFoundError",
    "PullDocsResult",
    "Section",
    "Subsection",
    "build_doc_tree",
    "classify_path",
    "clone_docs_folder",
    "collect_doc_files",
    "ensure_gitignore_entry",
    "generate_index",
    "inject_into_file",
    "marker_end",
    "marker_start",
    "parse_github_url",
    "pull_docs",
    "repo_key",
]
