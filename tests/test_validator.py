from glyphcode.config import Config, WorkAreaConfig
from glyphcode.generator import InstructionGenerator
from glyphcode.validator import GcodeValidator


def _render(text: str) -> str:
    gen = InstructionGenerator()
    return gen.start() + gen.render(text) + gen.finish()


def test_rendered_text_is_valid():
    result = GcodeValidator().validate(_render("Hi!"))
    assert result.valid
    assert not result.errors
    assert not result.warnings
    assert result.stats["pen_downs"] == result.stats["pen_ups"]
    assert result.stats["pen_downs"] == 7


def test_extent_covers_drawing():
    result = GcodeValidator().validate(_render("H"))
    extent = result.stats["extent"]
    assert extent["min_x"] == 0
    assert extent["max_x"] == 30
    assert extent["min_y"] == 0
    assert extent["max_y"] == 60


def test_out_of_bounds_is_clamped():
    config = Config(work_area=WorkAreaConfig(left=0, right=100, top=100, bottom=0))
    result = GcodeValidator(config).validate("G0 X10 Y10\nM3\nG1 X150 Y-5\nM5")
    assert not result.valid
    assert len(result.errors) == 2
    assert "G1 X100.00 Y0.00" in result.corrected_gcode


def test_unknown_command_and_bad_feed():
    result = GcodeValidator().validate("G28\nG1 F-5")
    assert any("G28" in w for w in result.warnings)
    assert any("F=-5" in e for e in result.errors)
    assert "G1 F500" in result.corrected_gcode
