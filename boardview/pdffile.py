"""The PDF document attached to a board file and the viewer it is shown in."""

from __future__ import annotations

import logging
import os
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import parse_str

log = logging.getLogger(__name__)

CONFIG_KEY = "PDFFilePath"


class PDFBridge:
    """Link to an external PDF viewer.

    This base class is the link used when no viewer is available: it only
    remembers which document is open and what was last searched, and never
    reports a selection.
    """

    def __init__(self) -> None:
        self.document: Optional[Path] = None
        self.last_search: Optional[tuple[str, bool, bool]] = None

    def open_document(self, pdf_file: "PDFFile") -> None:
        """Remember pdf_file's path as the open document."""
        self.document = pdf_file.path

    def close_document(self) -> None:
        """Forget the open document and the last search."""
        self.document = None
        self.last_search = None

    def document_search(self, text: str, whole_words_only: bool, case_sensitive: bool) -> None:
        """Remember the search request."""
        self.last_search = (text, whole_words_only, case_sensitive)

    def has_new_selection(self) -> bool:
        """Return True if the viewer's selection changed since the last call."""
        return False

    @property
    def selection(self) -> str:
        """Text currently selected in the viewer."""
        return ""


@dataclass
class PDFFile:
    """Path of the PDF document belonging to a board, stored in its settings."""

    bridge: Optional[PDFBridge] = field(default_factory=PDFBridge)
    path: Optional[Path] = None
    config_dir: Optional[Path] = None

    def _require_bridge(self, action: str) -> PDFBridge:
        if self.bridge is None:
            raise RuntimeError(f"PDFFile could not {action}: no PDF bridge")
        return self.bridge

    def reload(self) -> None:
        """Close the document in the viewer and open it again."""
        bridge = self._require_bridge("reload")
        bridge.close_document()
        bridge.open_document(self)

    def close(self) -> None:
        """Close the document in the viewer."""
        self._require_bridge("close").close_document()

    def load_from_config(self, values: MutableMapping[str, str], board_path: Path) -> None:
        """Read the PDF path from values, then write it back normalised.

        By default the PDF sits next to board_path with a .pdf extension; a
        stored path is relative to the directory of board_path.
        """
        board_path = Path(board_path)
        self.path = board_path.with_suffix(".pdf")
        config_dir = board_path.resolve().parent
        self.config_dir = config_dir
        stored = parse_str(values, CONFIG_KEY, "")
        if stored:
            self.path = config_dir / stored
        self.write_to_config(values, config_dir)

    def write_to_config(
        self, values: MutableMapping[str, str], config_dir: Optional[Path]
    ) -> None:
        """Store the PDF path into values, relative to config_dir.

        Nothing is written when config_dir is None or no path is set.
        """
        if config_dir is None or not self.path:
            return
        try:
            relative = os.path.relpath(Path(self.path).resolve(), Path(config_dir).resolve())
        except ValueError as exc:
            log.error("Error writing PDF file path: %s", exc)
            return
        values[CONFIG_KEY] = str(Path(relative))