from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

GitConfigFactory = Callable[[Path, str], Path]


def write_git_config(directory: Path, content: str) -> Path:
    git_dir = directory / ".git"
    git_dir.mkdir(parents=True, exist_ok=True)
    config_path = git_dir / "config"
    config_path.write_text(content, encoding="utf-8")
    return config_path


@pytest.fixture
def git_config() -> GitConfigFactory:
    return write_git_config
