"""
Extraction of remote declarations from ``.git/config`` files.

Only ``[remote "<name>"]`` section headers and ``url = <value>`` lines are
interpreted; every other git-config construct is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from ..errors import ConfigReadError
from ..logger import get_logger

log = get_logger(__name__)

GIT_CONFIG_RELATIVE_PATH = Path(".git") / "config"

_SECTION_PREFIX = "[remote "
_SECTION_SUFFIX = "]"
_URL_PREFIX = "url = "


@dataclass(frozen=True)
class NoActiveRemote:
    """Parser state before any ``[remote ...]`` header has been seen."""


@dataclass(frozen=True)
class ActiveRemote:
    """Parser state inside a ``[remote ...]`` section."""

    name: str


ParserState = Union[NoActiveRemote, ActiveRemote]


def advance(
    state: ParserState, line: str
) -> Tuple[ParserState, Optional[Tuple[str, str]]]:
    """
    Feed one raw line to the parser.

    Returns the next state and, when the line declared a URL for the active
    remote, the ``(name, url)`` pair to record.
    """
    stripped = line.strip()
    if stripped.startswith(_SECTION_PREFIX) and stripped.endswith(_SECTION_SUFFIX):
        name = stripped[len(_SECTION_PREFIX) : -len(_SECTION_SUFFIX)].replace('"', "")
        return ActiveRemote(name), None
    if stripped.startswith(_URL_PREFIX) and isinstance(state, ActiveRemote):
        return state, (state.name, stripped[len(_URL_PREFIX) :])
    return state, None


def parse_remote_lines(lines: Iterable[str]) -> Dict[str, str]:
    """Run the remote parser over already-decoded lines."""
    remotes: Dict[str, str] = {}
    state: ParserState = NoActiveRemote()
    for line in lines:
        state, entry = advance(state, line)
        if entry is not None:
            name, url = entry
            remotes[name] = url
    return remotes


def parse_git_config(config_path: Path) -> Dict[str, str]:
    """
    Parse a git config file into a mapping of remote name to URL.

    Raises
    ------
    ConfigReadError
        If the file cannot be opened or is not valid UTF-8.
    """
    try:
        with config_path.open("r", encoding="utf-8", newline="\n") as handle:
            return parse_remote_lines(handle)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(config_path, exc) from exc


def try_extract_remotes(directory: Path) -> Optional[Dict[str, str]]:
    """
    Return the remotes declared in ``directory/.git/config``.

    ``None`` means the directory is not a repository; an empty mapping means
    a repository without remotes.
    """
    config_path = directory / GIT_CONFIG_RELATIVE_PATH
    if not _is_file(config_path):
        return None
    remotes = parse_git_config(config_path)
    log.debug("repository_found", path=str(directory), remotes=len(remotes))
    return remotes


def _is_file(path: Path) -> bool:
    # A .git that cannot be searched is treated as "not a repository".
    try:
        return path.is_file()
    except OSError as exc:
        log.debug("config_stat_failed", path=str(path), error=str(exc))
        return False
