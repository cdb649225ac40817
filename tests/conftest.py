"""Shared test fixtures: isolated environments and resolver factories."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from resources_path.core.resolver import ResourcesPathResolver, get_default_resolver
from resources_path.runtime.environment import RuntimeEnvironment
from resources_path.runtime.filesystem import directory_exists


@pytest.fixture(autouse=True)
def _reset_default_resolver():
    get_default_resolver.cache_clear()
    yield
    get_default_resolver.cache_clear()


@pytest.fixture
def environ() -> dict[str, str]:
    """Environment mapping seen by the resolver under test (empty by default)."""
    return {}


@pytest.fixture
def fake_root(tmp_path: Path) -> Path:
    """Stand-in filesystem root for container marker files."""
    root = tmp_path / "sysroot"
    root.mkdir()
    return root


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    d = tmp_path / "app" / "bin"
    d.mkdir(parents=True)
    return d


@pytest.fixture
def scoped_exists(tmp_path: Path):
    """Directory check that sees nothing outside ``tmp_path``.

    Keeps upward searches from picking up a ``Resources`` folder that
    happens to sit above the test run's temp directory.
    """
    root = os.path.abspath(tmp_path)

    async def exists(path: str) -> bool:
        full = os.path.abspath(path)
        if os.path.commonpath([root, full]) != root:
            return False
        return await directory_exists(path)

    return exists


@pytest.fixture
def make_resolver(tmp_path: Path, environ, fake_root, base_dir, scoped_exists):
    """Build a resolver wired to ``environ`` and a throwaway directory tree."""

    def _make(**kwargs) -> ResourcesPathResolver:
        kwargs.setdefault("environment", RuntimeEnvironment(environ=environ, root=fake_root))
        kwargs.setdefault("base_dir", str(base_dir))
        kwargs.setdefault("cwd", str(tmp_path / "work"))
        kwargs.setdefault("exists", scoped_exists)
        return ResourcesPathResolver(**kwargs)

    return _make
