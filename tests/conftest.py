"""Shared fixtures: a fake ``git`` so no test touches the network."""
from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


class FakeGit:
    """Stands in for ``subprocess.run`` of git commands.

    ``clone`` materializes ``layout`` (relative path -> text) into the
    clone directory; ``fail_on`` makes the named subcommand exit 128.
    """

    def __init__(self) -> None:
        self.layout: dict[str, str] = {}
        self.fail_on: str | None = None
        self.calls: list[tuple[list[str], Path]] = []

    def __call__(self, cmd: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        cwd = Path(kwargs["cwd"])
        self.calls.append((list(cmd), cwd))
        if cmd[1] == self.fail_on:
            return subprocess.CompletedProcess(cmd, 128, "", "fatal: repository not found\n")
        if cmd[1] == "clone":
            for rel, text in self.layout.items():
                target = cwd / rel
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_text(text)
        return subprocess.CompletedProcess(cmd, 0, "", "")


@pytest.fixture
def fake_git(monkeypatch: pytest.MonkeyPatch) -> FakeGit:
    git = FakeGit()
    monkeypatch.setattr(subprocess, "run", git)
    return git


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[list[str]], Path]:
    """Create empty files at the given relative paths under ``tmp_path/docs``."""

    def _make(paths: list[str]) -> Path:
        root = tmp_path / "docs"
        for rel in paths:
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("# doc\n")
        return root

    return _make
