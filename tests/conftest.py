"""Root pytest configuration for all tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from purge_deps.logging import reset_logging


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run from tmp_path so .gitignore and .purge-deps.yaml lookups stay inside it."""
    monkeypatch.chdir(tmp_path)
    yield
    reset_logging()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small JS project tree.

    project/
        README.md
        package-lock.json
        node_modules/left-pad/index.js
        src/index.js
        src/node_modules/keep.js
        packages/app/node_modules/react/index.js
        packages/app/yarn.lock
        packages/app/lib/util.js
    """
    root = tmp_path / "project"
    (root / "node_modules" / "left-pad").mkdir(parents=True)
    (root / "node_modules" / "left-pad" / "index.js").write_text("module.exports = 1")
    (root / "src" / "node_modules").mkdir(parents=True)
    (root / "src" / "index.js").write_text("console.log(1)")
    (root / "src" / "node_modules" / "keep.js").write_text("keep")
    (root / "packages" / "app" / "node_modules" / "react").mkdir(parents=True)
    (root / "packages" / "app" / "node_modules" / "react" / "index.js").write_text("react")
    (root / "packages" / "app" / "lib").mkdir()
    (root / "packages" / "app" / "lib" / "util.js").write_text("util")
    (root / "packages" / "app" / "yarn.lock").write_text("# yarn lockfile v1")
    (root / "package-lock.json").write_text("{}")
    (root / "README.md").write_text("# project")
    return root


@pytest.fixture
def snapshot():
    """Return a function listing relative paths of everything under a root."""

    def _snapshot(root: Path) -> set[str]:
        return {p.relative_to(root).as_posix() for p in root.rglob("*")}

    return _snapshot
