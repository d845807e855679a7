"""Path helpers shared by rendering and error reporting."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Union


def display_path(path: Union[str, PurePath]) -> str:
    """
    Text form of ``path`` that is always encodable.

    Bytes that are not valid UTF-8 (surfaced by ``os.fsdecode`` as lone
    surrogates) become U+FFFD.
    """
    return os.fsencode(path).decode("utf-8", "replace")
