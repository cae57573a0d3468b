from pathlib import Path

import pytest

from boardview.pdffile import PDFBridge, PDFFile


class RecordingBridge(PDFBridge):
    def __init__(self):
        self.calls = []

    def open_document(self, pdf_file):
        self.calls.append(("open", pdf_file.path))

    def close_document(self):
        self.calls.append(("close", None))


def test_base_bridge_reports_no_selection():
    bridge = PDFBridge()
    bridge.open_document(PDFFile())
    bridge.document_search("R1", True, False)
    assert bridge.has_new_selection() is False
    assert bridge.selection == ""


def test_reload_closes_then_opens():
    bridge = RecordingBridge()
    pdf = PDFFile(bridge=bridge, path=Path("a.pdf"))
    pdf.reload()
    assert bridge.calls == [("close", None), ("open", Path("a.pdf"))]


def test_close_only_closes():
    bridge = RecordingBridge()
    PDFFile(bridge=bridge).close()
    assert bridge.calls == [("close", None)]


def test_missing_bridge_raises():
    with pytest.raises(RuntimeError):
        PDFFile(bridge=None).reload()
    with pytest.raises(RuntimeError):
        PDFFile(bridge=None).close()


def test_default_path_next_to_board(tmp_path):
    values = {}
    pdf = PDFFile()
    pdf.load_from_config(values, tmp_path / "board.brd")
    assert pdf.path == tmp_path / "board.pdf"
    assert values["PDFFilePath"] == "board.pdf"
    assert pdf.config_dir == tmp_path.resolve()


def test_stored_path_is_relative_to_board_dir(tmp_path):
    values = {"PDFFilePath": str(Path("docs") / "schematic.pdf")}
    pdf = PDFFile()
    pdf.load_from_config(values, tmp_path / "board.brd")
    assert pdf.path == tmp_path.resolve() / "docs" / "schematic.pdf"
    assert Path(values["PDFFilePath"]) == Path("docs") / "schematic.pdf"


def test_write_round_trip(tmp_path):
    pdf = PDFFile(path=tmp_path / "sub" / "x.pdf")
    values = {}
    pdf.write_to_config(values, tmp_path)
    other = PDFFile()
    other.load_from_config(values, tmp_path / "board.brd")
    assert other.path == (tmp_path / "sub" / "x.pdf").resolve()


def test_write_without_destination_writes_nothing(tmp_path):
    values = {}
    PDFFile(path=tmp_path / "x.pdf").write_to_config(values, None)
    PDFFile().write_to_config(values, tmp_path)
    assert values == {}