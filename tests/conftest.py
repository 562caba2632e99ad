"""Shared fixtures for embedfile tests."""

from pathlib import Path
from typing import Iterator

import pytest

from embedfile import cache as cache_module
from embedfile import config as config_module
from embedfile.cache import RuntimeContentCache
from embedfile.config import load_config


@pytest.fixture(autouse=True)
def isolated_process_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test a fresh mode selection and shared cache."""
    monkeypatch.delenv("EMBEDFILE_MODE", raising=False)
    monkeypatch.delenv("EMBEDFILE_VERBOSE", raising=False)
    monkeypatch.setattr(config_module, "_load_from_pyproject_toml", lambda: {})
    monkeypatch.setattr(config_module, "_ACTIVE_CONFIG", None)
    monkeypatch.setattr(cache_module, "_CONTENT_CACHE", None)
    yield


@pytest.fixture
def development_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Select the development strategy for the rest of the test."""
    monkeypatch.setattr(
        config_module, "_ACTIVE_CONFIG", load_config(mode="development")
    )


@pytest.fixture
def content_cache() -> RuntimeContentCache:
    """A private cache, so assertions do not depend on the shared one."""
    return RuntimeContentCache()


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    """Directory holding ``a/b.txt`` with the contents ``hello``."""
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "b.txt").write_bytes(b"hello")
    return tmp_path
