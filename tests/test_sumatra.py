import pytest

from boardview.sumatra import (
    build_open_command,
    build_reverse_search_command,
    build_search_command,
    launch_arguments,
    parse_search_command,
)


def test_open_command_format():
    assert build_open_command("board.pdf") == '[Open("board.pdf",0,1,1)]'


def test_search_command_case_flag():
    assert build_search_command("b.pdf", "R1", False, True) == '[Search("b.pdf","R1",1)]'
    assert build_search_command("b.pdf", "R1", False, False) == '[Search("b.pdf","R1",0)]'


def test_whole_words_surrounds_with_spaces():
    command = build_search_command("b.pdf", "C5", True, False)
    assert '," C5 ",' in command


def test_reverse_search_round_trip():
    for text in ["PP3V3", "", "a b", 'q"x']:
        assert parse_search_command(build_reverse_search_command(text)) == text


def test_parse_known_command():
    assert parse_search_command('[Search("U1000")]') == "U1000"


@pytest.mark.parametrize("command", ["", '[Open("x",0,1,1)]', '[Search("x)]', '[Search(")]'])
def test_parse_unknown_command_raises(command):
    with pytest.raises(ValueError):
        parse_search_command(command)


def test_launch_arguments_quotes_both():
    assert launch_arguments("SumatraPDF.exe", "b.pdf") == '"SumatraPDF.exe" "b.pdf"'


def test_launch_arguments_empty_executable_raises():
    with pytest.raises(ValueError):
        launch_arguments("", "b.pdf")