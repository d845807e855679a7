from pathlib import Path

import pytest
from pydantic import ValidationError

from gitremotes import settings as settings_module
from gitremotes.rendering import OutputFormat
from gitremotes.settings import AppSettings, load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GITREMOTES_CONFIG_PATH", raising=False)

    loaded = load_settings()

    assert loaded.tree is False
    assert loaded.follow_symlinks is False
    assert loaded.output_format is OutputFormat.PLAIN
    assert loaded.json_indent == 2
    assert loaded.log_file is None


def test_toml_sections_are_flattened(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config = tmp_path / "custom.toml"
    config.write_text(
        """
[search]
tree = true
follow_symlinks = true

[output]
format = "YAML"
json_indent = 4

[logging]
level = "debug"
file = ""
""",
        encoding="utf-8",
    )
    monkeypatch.setenv("GITREMOTES_CONFIG_PATH", str(config))

    loaded = load_settings()

    assert loaded.tree is True
    assert loaded.follow_symlinks is True
    assert loaded.output_format is OutputFormat.YAML
    assert loaded.json_indent == 4
    assert loaded.log_level == "debug"
    assert loaded.log_file is None


def test_default_config_file_in_working_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GITREMOTES_CONFIG_PATH", raising=False)
    (tmp_path / "gitremotes.toml").write_text('[output]\nformat = "json"\n', encoding="utf-8")

    assert load_settings().output_format is OutputFormat.JSON


def test_environment_variables(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GITREMOTES_CONFIG_PATH", raising=False)
    monkeypatch.setenv("GITREMOTES_TREE", "1")
    monkeypatch.setenv("GITREMOTES_OUTPUT_FORMAT", "json")

    loaded = AppSettings()

    assert loaded.tree is True
    assert loaded.output_format is OutputFormat.JSON


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        AppSettings(output_format="xml")
    with pytest.raises(ValidationError):
        AppSettings(json_indent=-1)
    with pytest.raises(ValidationError):
        AppSettings(log_level="loud")
    assert AppSettings(log_level="debug").log_level == "debug"


def test_missing_sections_yield_no_overrides() -> None:
    assert settings_module._flatten_config({"unrelated": {"x": 1}}) == {}
