"""Shared fixtures: throwaway git repositories built with GitPython."""

from __future__ import annotations

from pathlib import Path

import pytest
from git import Actor, Repo


class RepoBuilder:
    """Commits files into a fresh repository under ``root``."""

    def __init__(self, root: Path):
        self.root = root
        self.repo = Repo.init(root)
        self.shas: list[str] = []
        # Configure identity for commits
        with self.repo.config_writer() as cw:
            cw.set_value("user", "name", "Tester")
            cw.set_value("user", "email", "tester@example.com")

    def commit(self, author: str, files: dict[str, str | None], message: str = "change") -> str:
        """Write (or delete, when content is None) ``files`` and commit them as ``author``."""
        added: list[str] = []
        removed: list[str] = []
        for rel, content in files.items():
            path = self.root / rel
            if content is None:
                removed.append(str(path))
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            added.append(str(path))
        if added:
            self.repo.index.add(added)
        if removed:
            self.repo.index.remove(removed, working_tree=True)
        actor = Actor(author, f"{author.lower().replace(' ', '.')}@example.com")
        sha = self.repo.index.commit(message, author=actor, committer=actor).hexsha
        self.shas.append(sha)
        return sha


@pytest.fixture
def repo_builder(tmp_path: Path):
    builder = RepoBuilder(tmp_path / "repo")
    yield builder
    builder.repo.close()


@pytest.fixture
def sample_repo(repo_builder: RepoBuilder) -> RepoBuilder:
    """Four commits by two authors, shas recorded oldest first.

    - Alice: root commit adding README.md and src/app.py
    - Bob: modifies src/app.py, adds src/util.py
    - Alice: modifies src/app.py and README.md
    - Alice: deletes src/util.py
    """
    repo_builder.commit("Alice", {"README.md": "# demo\n", "src/app.py": "print(1)\n"}, "init")
    repo_builder.commit("Bob", {"src/app.py": "print(2)\n", "src/util.py": "X = 1\n"}, "util")
    repo_builder.commit("Alice", {"src/app.py": "print(3)\n", "README.md": "# demo 2\n"}, "docs")
    repo_builder.commit("Alice", {"src/util.py": None}, "drop util")
    return repo_builder
