"""Pytest fixtures for pl tests."""

from pathlib import Path

import pytest

from pl.models import Project


@pytest.fixture(autouse=True)
def clear_caches(monkeypatch: pytest.MonkeyPatch):
    """Clear the config cache and PL_* env vars before each test."""
    from pl.config import clear_config_cache

    for var in ("PL_CONFIG_DIR", "PL_EDITOR_COMMAND", "PL_PROJECT_DIRS", "PL_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    clear_config_cache()

    yield

    clear_config_cache()


@pytest.fixture
def make_projects():
    """Build Project records from names, rooted under /src."""

    def _make(*names: str) -> list[Project]:
        return [Project(name=n, path=Path("/src") / n) for n in names]

    return _make


@pytest.fixture
def project_root(tmp_path: Path):
    """Create a root dir; returns a helper that adds a child dir, optionally with .git."""
    root = tmp_path / "Projects"
    root.mkdir()

    def _add(name: str, git: bool = True, readme: str | None = None) -> Path:
        path = root / name
        path.mkdir()
        if git:
            (path / ".git").mkdir()
        if readme is not None:
            (path / "README.md").write_text(readme)
        return path

    _add.root = root  # type: ignore[attr-defined]
    return _add
