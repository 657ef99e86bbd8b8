"""Tests for docs_to_agent.github_source (git is faked, never executed)."""
from __future__ import annotations

from pathlib import Path

import pytest

from docs_to_agent.doc_types import GitHubUrl, PullDocsResult
from docs_to_agent.errors import (
    DocsPathNotFoundError,
    DocsToAgentError,
    GitCommandError,
    GitHubUrlError,
)
from docs_to_agent.github_source import (
    clone_docs_folder,
    parse_github_url,
    pull_docs,
    repo_key,
)


class TestParseGitHubUrl:
    def test_standard_tree_url(self) -> None:
        assert parse_github_url("https://github.com/nuxt/nuxt/tree/main/docs") == GitHubUrl(
            owner="nuxt", repo="nuxt", branch="main", docs_path="docs",
        )

    def test_nested_docs_path(self) -> None:
        result = parse_github_url(
            "https://github.com/owner/repo/tree/develop/packages/core/docs"
        )
        assert result.branch == "develop"
        assert result.docs_path == "packages/core/docs"

    def test_deep_nested_path(self) -> None:
        result = parse_github_url("https://github.com/shadcn-ui/ui/tree/main/apps/v4/content/docs")
        assert result == GitHubUrl("shadcn-ui", "ui", "main", "apps/v4/content/docs")

    def test_trailing_slash_and_whitespace(self) -> None:
        assert parse_github_url("https://github.com/nuxt/nuxt/tree/main/docs/ ").docs_path == "docs"

    def test_http_scheme(self) -> None:
        assert parse_github_url("http://github.com/a/b/tree/x/y").repo == "b"

    @pytest.mark.parametrize(
        "url",
        ["https://github.com/nuxt/nuxt", "https://github.com/nuxt/nuxt.git", "https://github.com/nuxt/nuxt/"],
    )
    def test_repo_url_without_docs_path(self, url: str) -> None:
        with pytest.raises(GitHubUrlError, match="URL must include a docs path") as exc:
            parse_github_url(url)
        assert "https://github.com/nuxt/nuxt/tree/main/docs" in str(exc.value)

    @pytest.mark.parametrize("url", ["not-a-url", "https://gitlab.com/a/b/tree/main/docs", ""])
    def test_invalid_url(self, url: str) -> None:
        with pytest.raises(GitHubUrlError, match="Invalid GitHub URL"):
            parse_github_url(url)

    def test_url_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_github_url("nope")


def test_repo_key() -> None:
    assert repo_key("nuxt", "nuxt") == "nuxt-nuxt"
    assert repo_key("shadcn-ui", "ui") == "shadcn-ui-ui"


class TestCloneDocsFolder:
    def test_copies_docs_folder_and_cleans_tmp(self, tmp_path: Path, fake_git) -> None:
        fake_git.layout = {
            "docs/guide/intro.md": "# Intro\n",
            "docs/api/hooks/use.md": "# use\n",
            "src/main.ts": "code",
        }
        dest = tmp_path / ".docs-to-agent" / "o-r"

        clone_docs_folder("https://github.com/o/r.git", "main", "docs", dest)

        assert (dest / "guide" / "intro.md").read_text() == "# Intro\n"
        assert (dest / "api" / "hooks" / "use.md").exists()
        assert not (dest / "src").exists()
        assert not (tmp_path / ".docs-to-agent" / "o-r-tmp").exists()

        clone_cmd, clone_cwd = fake_git.calls[0]
        assert clone_cmd == [
            "git", "clone", "--depth", "1", "--filter=blob:none", "--sparse",
            "--branch", "main", "https://github.com/o/r.git", ".",
        ]
        assert clone_cwd.name == "o-r-tmp"
        assert fake_git.calls[1][0] == ["git", "sparse-checkout", "set", "docs"]

    def test_replaces_existing_destination(self, tmp_path: Path, fake_git) -> None:
        fake_git.layout = {"docs/new.md": "new"}
        dest = tmp_path / "dest"
        dest.mkdir()
        (dest / "stale.md").write_text("stale")

        clone_docs_folder("url", "main", "docs", dest)

        assert (dest / "new.md").exists()
        assert not (dest / "stale.md").exists()

    def test_missing_docs_path(self, tmp_path: Path, fake_git) -> None:
        fake_git.layout = {"other/file.md": "x"}
        dest = tmp_path / "dest"
        dest.mkdir()
        (dest / "keep.md").write_text("keep")

        with pytest.raises(DocsPathNotFoundError, match='Docs path "docs" not found'):
            clone_docs_folder("url", "main", "docs", dest)

        assert (dest / "keep.md").exists()
        assert not (tmp_path / "dest-tmp").exists()

    def test_git_failure(self, tmp_path: Path, fake_git) -> None:
        fake_git.fail_on = "clone"
        with pytest.raises(GitCommandError) as exc:
            clone_docs_folder("url", "main", "docs", tmp_path / "dest")
        assert exc.value.returncode == 128
        assert "repository not found" in str(exc.value)
        assert isinstance(exc.value, DocsToAgentError)
        assert not (tmp_path / "dest-tmp").exists()

    def test_leftover_tmp_dir_is_cleared(self, tmp_path: Path, fake_git) -> None:
        fake_git.layout = {"docs/a/b.md": "b"}
        leftover = tmp_path / "dest-tmp"
        leftover.mkdir()
        (leftover / "junk").write_text("junk")

        clone_docs_folder("url", "main", "docs", tmp_path / "dest")

        assert (tmp_path / "dest" / "a" / "b.md").exists()
        assert not leftover.exists()


def test_pull_docs(tmp_path: Path, fake_git) -> None:
    fake_git.layout = {
        "docs/index.md": "root",
        "docs/guide/intro.md": "x",
        "docs/guide/setup.mdx": "x",
        "docs/api/hooks/use.md": "x",
    }
    result = pull_docs("nuxt", "nuxt", "main", "docs", tmp_path)

    assert result == PullDocsResult(local_docs_dir=".docs-to-agent/nuxt-nuxt", file_count=3)
    assert (tmp_path / ".docs-to-agent" / "nuxt-nuxt" / "guide" / "intro.md").exists()
    assert fake_git.calls[0][0][-2] == "https://github.com/nuxt/nuxt.git"
