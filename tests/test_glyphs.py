import pytest

from glyphcode.config import Config, FontConfig
from glyphcode.generator import InstructionGenerator
from glyphcode.glyphs import GLYPHS, get_glyph, list_glyphs
from glyphcode.turtle import PenDown, PenUp, Rapid


def test_printable_ascii_is_covered():
    for code in range(0x20, 0x7F):
        assert chr(code) in GLYPHS


def test_get_glyph():
    assert get_glyph("A") is GLYPHS["A"]
    assert get_glyph("☃") is None
    assert "A" in list_glyphs()


@pytest.mark.parametrize("round_corners", [False, True])
@pytest.mark.parametrize("char", list(GLYPHS))
def test_every_glyph_renders(char, round_corners):
    gen = InstructionGenerator(Config(font=FontConfig(round_corners=round_corners)))
    gen.start()
    motions = gen.render_motions(char)

    if char == " ":
        assert motions == []
        return

    assert isinstance(motions[0], Rapid)
    assert isinstance(motions[-1], PenUp)
    assert motions.count(PenDown()) == motions.count(PenUp())
