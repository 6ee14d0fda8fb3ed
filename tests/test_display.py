import pytest

from rsnimons.display import (
    Color,
    ascii_daftar_checkup,
    ascii_ded,
    ascii_diagnosis,
    ascii_ngobatin,
    colored,
    logo,
)


def _all_arts():
    return [ascii_daftar_checkup(), ascii_diagnosis(), ascii_ngobatin(), ascii_ded()]


@pytest.mark.parametrize(
    "color, code",
    [
        (Color.RED, "\x1b[31m"),
        (Color.CYAN, "\x1b[36m"),
        (Color.YELLOW, "\x1b[33m"),
        (Color.MAGENTA, "\x1b[35m"),
    ],
)
def test_colored_uses_ansi_sequence(color, code):
    assert colored("x", color) == code + "x\x1b[0m"


def test_colored_wraps_text_and_resets():
    assert colored("hello", Color.GREEN) == "\x1b[32mhello\x1b[0m"


def test_colored_empty_text_is_code_then_reset():
    assert colored("", Color.BLUE) == "\x1b[34m\x1b[0m"


def test_logo_ends_with_reset_and_has_fourteen_lines():
    text = logo()
    assert text.endswith("\x1b[0m")
    body = text[: -len("\x1b[0m")]
    assert body.endswith("\n")
    assert len(body.splitlines()) == 14


@pytest.mark.parametrize(
    "code",
    ["\x1b[32m", "\x1b[33m", "\x1b[31m", "\x1b[36m", "\x1b[34m", "\x1b[35m"],
)
def test_logo_uses_every_banner_colour(code):
    assert code in logo()


def test_logo_first_line_is_blank():
    first = logo().split("\n", 1)[0]
    assert first.strip() == ""


def test_art_is_a_24_by_36_block():
    for text in _all_arts():
        assert text.endswith("\n")
        lines = text.splitlines()
        assert len(lines) == 24
        assert all(len(line) == 36 for line in lines)


def test_art_has_no_colour_codes():
    for text in _all_arts():
        assert "\x1b" not in text


def test_ded_art_first_line():
    assert ascii_ded().splitlines()[0] == ":..::..............................."


def test_diagnosis_art_last_line():
    assert ascii_diagnosis().splitlines()[-1] == ":-                      .=++========"