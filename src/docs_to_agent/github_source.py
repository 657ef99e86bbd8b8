"""Fetch a docs folder from GitHub with a shallow sparse ``git clone``."""
from __future__ import annotations

import logging
import re
import shutil
import subprocess
from pathlib import Path

from docs_to_agent.discovery import collect_doc_files
from docs_to_agent.doc_types import GitHubUrl, PullDocsResult
from docs_to_agent.errors import DocsPathNotFoundError, GitCommandError, GitHubUrlError

log = logging.getLogger(__name__)

DOCS_BASE_DIR = ".docs-to-agent"

_TREE_URL_RE = re.compile(
    r"^https?://github\.com/([^/]+)/([^/]+)/tree/([^/]+)/(.+?)/?\s*$"
)
_REPO_URL_RE = re.compile(r"^https?://github\.com/([^/]+)/([^/]+?)(\.git)?/?$")


def repo_key(owner: str, repo: str) -> str:
    """Block key and local folder name for a repository."""
    return f"{owner}-{repo}"


def parse_github_url(url: str) -> GitHubUrl:
    """Parse ``https://github.com/<owner>/<repo>/tree/<branch>/<docs-path>``.

    Raises:
        GitHubUrlError: for a bare repository URL (no docs path) or any
            other string that is not a GitHub tree URL.
    """
    m = _TREE_URL_RE.match(url)
    if m:
        return GitHubUrl(owner=m[1], repo=m[2], branch=m[3], docs_path=m[4])

    m = _REPO_URL_RE.match(url)
    if m:
        raise GitHubUrlError(
            "URL must include a docs path. Example: "
            f"https://github.com/{m[1]}/{m[2]}/tree/main/docs"
        )

    raise GitHubUrlError(
        "Invalid GitHub URL. Expected format: "
        "https://github.com/owner/repo/tree/branch/docs-path"
    )


def _run_git(args: list[str], cwd: Path) -> None:
    cmd = ["git", *args]
    log.debug("running %s in %s", " ".join(cmd), cwd)
    proc = subprocess.run(
        cmd,
        cwd=str(cwd),
        capture_output=True,
        text=True,
        check=False,
    )
    if proc.returncode != 0:
        raise GitCommandError(cmd, proc.returncode, proc.stderr or "")


def clone_docs_folder(
    repo_url: str,
    branch: str,
    docs_path: str,
    dest_dir: Path,
) -> None:
    """Replace ``dest_dir`` with ``docs_path`` from ``branch`` of ``repo_url``.

    Clones into a sibling ``<dest_dir>-tmp`` directory that is removed
    afterwards whether or not the clone succeeded. ``dest_dir`` is only
    touched once the docs folder is known to exist.
    """
    tmp_dir = dest_dir.with_name(dest_dir.name + "-tmp")
    if tmp_dir.exists():
        shutil.rmtree(tmp_dir)
    tmp_dir.mkdir(parents=True)

    try:
        _run_git(
            [
                "clone", "--depth", "1", "--filter=blob:none", "--sparse",
                "--branch", branch, repo_url, ".",
            ],
            tmp_dir,
        )
        _run_git(["sparse-checkout", "set", docs_path], tmp_dir)

        src_dir = tmp_dir / docs_path
        if not src_dir.exists():
            raise DocsPathNotFoundError(docs_path)

        if dest_dir.exists():
            shutil.rmtree(dest_dir)
        shutil.copytree(src_dir, dest_dir)
    finally:
        shutil.rmtree(tmp_dir, ignore_errors=True)


def pull_docs(
    owner: str,
    repo: str,
    branch: str,
    docs_path: str,
    cwd: Path,
) -> PullDocsResult:
    """Download a repository's docs into ``<cwd>/.docs-to-agent/<owner>-<repo>``."""
    repo_url = f"https://github.com/{owner}/{repo}.git"
    key = repo_key(owner, repo)
    local_docs_dir = cwd / DOCS_BASE_DIR / key

    clone_docs_folder(repo_url, branch, docs_path, local_docs_dir)
    files = collect_doc_files(local_docs_dir)

    return PullDocsResult(
        local_docs_dir=f"{DOCS_BASE_DIR}/{key}",
        file_count=len(files),
    )
