import pytest

from glyphcode.config import Config, FontConfig
from glyphcode.errors import InputError
from glyphcode.generator import InstructionGenerator
from glyphcode.vector import Vector2
from glyphcode.writer import line_advance, write_text


@pytest.fixture
def gen():
    session = InstructionGenerator(Config(font=FontConfig(font_size=10, spacing=0)))
    session.start()
    return session


def test_line_advance(gen):
    assert line_advance(gen) == 15
    gen.spacing = 0.2
    assert line_advance(gen) == pytest.approx(17)


def test_newline_returns_to_left_margin(gen):
    gen.cursor = (20, 0)
    gcode = write_text(gen, "-\n-")
    assert "\nG0 X20 Y5\n" in gcode
    assert "\nG0 X20 Y-10\n" in gcode
    assert gen.cursor.x == pytest.approx(23)
    assert gen.cursor.y == -15


def test_crlf_is_a_single_break(gen):
    write_text(gen, "-\r\n")
    assert gen.cursor == Vector2(0, -15)


def test_unknown_character(gen):
    with pytest.raises(InputError):
        write_text(gen, "-☃-")


def test_skip_unknown(gen):
    gcode = write_text(gen, "-☃-", skip_unknown=True)
    assert gcode.count("G0 ") == 2
    assert gen.cursor.x == pytest.approx(6)
