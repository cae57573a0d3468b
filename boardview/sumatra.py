"""Command strings exchanged with the SumatraPDF viewer over DDE."""

from __future__ import annotations

from pathlib import Path
from typing import Union

SERVICE = "SUMATRA"
TOPIC = "control"
SERVER_SERVICE = "OpenBoardView"
DEFAULT_EXECUTABLE = "SumatraPDF.exe"

_SEARCH_PREFIX = '[Search("'
_SEARCH_SUFFIX = '")]'

PathLike = Union[str, Path]


def build_open_command(pdf_path: PathLike) -> str:
    """Return the command asking the viewer to open pdf_path."""
    return f'[Open("{pdf_path}",0,1,1)]'


def build_search_command(
    pdf_path: PathLike, text: str, whole_words_only: bool, case_sensitive: bool
) -> str:
    """Return the command searching text in the document pdf_path.

    The viewer has no whole-word option; surrounding the text with spaces
    has the same effect.
    """
    if whole_words_only:
        text = f" {text} "
    flag = "1" if case_sensitive else "0"
    return f'[Search("{pdf_path}","{text}",{flag})]'


def build_reverse_search_command(text: str) -> str:
    """Return the command the viewer sends back to search text on the board."""
    return f"{_SEARCH_PREFIX}{text}{_SEARCH_SUFFIX}"


def parse_search_command(command: str) -> str:
    """Return the search text of a reverse-search command.

    Raises ValueError for any other command.
    """
    if (
        len(command) >= len(_SEARCH_PREFIX) + len(_SEARCH_SUFFIX)
        and command.startswith(_SEARCH_PREFIX)
        and command.endswith(_SEARCH_SUFFIX)
    ):
        return command[len(_SEARCH_PREFIX) : len(command) - len(_SEARCH_SUFFIX)]
    raise ValueError(f"Unknown request: {command}")


def launch_arguments(executable: PathLike, pdf_path: PathLike) -> str:
    """Return the command line starting the viewer on pdf_path."""
    if not str(executable):
        raise ValueError("PDF software executable path empty")
    return f'"{executable}" "{pdf_path}"'