"""Shared fixtures for dirble tests."""
from pathlib import Path
from typing import List

import pytest


@pytest.fixture
def extension_file(tmp_path: Path) -> Path:
    """An extension file with padding, blank lines and a duplicate."""
    path = tmp_path / "extensions.txt"
    path.write_text(" php \n\nasp\n  \nhtml\nphp\n")
    return path


@pytest.fixture
def advisories() -> List[str]:
    """Collects advisory messages instead of printing them."""
    return []


@pytest.fixture
def quiet_env(monkeypatch):
    """Keep the CLI banner out of the output and logging at its default."""
    monkeypatch.setenv("DIRBLE_BANNER", "0")
    monkeypatch.delenv("DIRBLE_LOG_LEVEL", raising=False)
