from pathlib import Path

import pytest

from gitremotes.discovery.config_parser import (
    ActiveRemote,
    NoActiveRemote,
    advance,
    parse_git_config,
    parse_remote_lines,
    try_extract_remotes,
)
from gitremotes.errors import ConfigReadError


def test_parse_single_remote(tmp_path: Path, git_config) -> None:
    config_path = git_config(
        tmp_path, '[remote "origin"]\n    url = https://github.com/user/repo.git\n'
    )
    assert parse_git_config(config_path) == {
        "origin": "https://github.com/user/repo.git"
    }


def test_parse_multiple_remotes_alongside_other_sections(tmp_path: Path, git_config) -> None:
    content = """
[core]
\trepositoryformatversion = 0
\tbare = false
[remote "origin"]
\turl = https://github.com/user/repo.git
\tfetch = +refs/heads/*:refs/remotes/origin/*
[branch "main"]
\tremote = origin
[remote "upstream"]
\turl = https://github.com/upstream/repo.git
"""
    config_path = git_config(tmp_path, content)
    assert parse_git_config(config_path) == {
        "origin": "https://github.com/user/repo.git",
        "upstream": "https://github.com/upstream/repo.git",
    }


def test_repeated_remote_keeps_last_url() -> None:
    lines = [
        '[remote "origin"]',
        "url = https://first.example/repo.git",
        '[remote "origin"]',
        "url = https://second.example/repo.git",
    ]
    assert parse_remote_lines(lines) == {"origin": "https://second.example/repo.git"}


def test_url_without_active_remote_is_ignored() -> None:
    lines = ["url = https://orphan.example/repo.git", "[core]", "  bare = false"]
    assert parse_remote_lines(lines) == {}


def test_malformed_section_header_still_sets_name() -> None:
    assert parse_remote_lines(["[remote origin]", "url = git@host:x.git"]) == {
        "origin": "git@host:x.git"
    }
    assert parse_remote_lines(["[remote ]", "url = git@host:y.git"]) == {
        "": "git@host:y.git"
    }


def test_comments_and_spacing_variants_are_ignored() -> None:
    lines = [
        "# [remote \"commented\"]",
        '[remote "origin"]',
        "  ; url = https://comment.example",
        "  url=https://nospace.example",
        "\turl = https://kept.example  \r\n",
    ]
    assert parse_remote_lines(lines) == {"origin": "https://kept.example"}


def test_advance_transitions() -> None:
    state, entry = advance(NoActiveRemote(), "url = https://ignored")
    assert state == NoActiveRemote()
    assert entry is None

    state, entry = advance(state, '  [remote "up\"stream"]  ')
    assert state == ActiveRemote("upstream")
    assert entry is None

    state, entry = advance(state, "url = https://example.com/a.git")
    assert state == ActiveRemote("upstream")
    assert entry == ("upstream", "https://example.com/a.git")


def test_missing_config_is_not_a_repository(tmp_path: Path) -> None:
    assert try_extract_remotes(tmp_path) is None


def test_git_dir_without_config_is_not_a_repository(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    assert try_extract_remotes(tmp_path) is None


def test_empty_config_is_repository_without_remotes(tmp_path: Path, git_config) -> None:
    git_config(tmp_path, "")
    assert try_extract_remotes(tmp_path) == {}


def test_sectionless_config_is_repository_without_remotes(tmp_path: Path, git_config) -> None:
    git_config(tmp_path, "[core]\n\tbare = false\n")
    assert try_extract_remotes(tmp_path) == {}


def test_undecodable_config_raises(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    config_path = tmp_path / ".git" / "config"
    config_path.write_bytes(b'[remote "origin"]\n\turl = \xff\xfe\n')

    with pytest.raises(ConfigReadError) as excinfo:
        try_extract_remotes(tmp_path)
    assert excinfo.value.path == config_path
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_unreadable_config_raises(tmp_path: Path, git_config, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = git_config(tmp_path, '[remote "origin"]\n\turl = x\n')

    def _deny(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "open", _deny)
    with pytest.raises(ConfigReadError) as excinfo:
        try_extract_remotes(tmp_path)
    assert excinfo.value.path == config_path
    assert "Permission denied" in str(excinfo.value)


def test_unsearchable_git_dir_is_not_a_repository(
    tmp_path: Path, git_config, monkeypatch: pytest.MonkeyPatch
) -> None:
    git_config(tmp_path, '[remote "origin"]\n\turl = x\n')

    def _deny(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "is_file", _deny)
    assert try_extract_remotes(tmp_path) is None


def test_lone_carriage_return_does_not_split_lines(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_bytes(b'[remote "a"]\rurl = x\n')

    assert try_extract_remotes(tmp_path) == {}


def test_crlf_line_endings_are_parsed(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_bytes(
        b'[remote "origin"]\r\n\turl = https://example.com/a.git\r\n'
    )

    assert try_extract_remotes(tmp_path) == {"origin": "https://example.com/a.git"}
