from glyphcode.config import GcodeConfig
from glyphcode.gcode import GcodeEncoder
from glyphcode.turtle import Feed, PenDown, PenUp, Rapid


def test_number_formatting():
    enc = GcodeEncoder()
    assert enc.number(3.0) == "3"
    assert enc.number(1.25) == "1.25"
    assert enc.number(-2.5) == "-2.5"
    assert enc.number(-0.0001) == "0"
    assert enc.number(1.23456) == "1.235"
    assert GcodeEncoder(GcodeConfig(precision=1)).number(1.26) == "1.3"


def test_encode_motions():
    enc = GcodeEncoder()
    motions = [Rapid(0, 5), PenDown(), Feed(3, 5), Feed(y=1), Feed(x=2), PenUp()]
    assert enc.encode(motions) == "\nG0 X0 Y5\nM3\nG1 X3 Y5\nG1 Y1\nG1 X2\nM5"


def test_custom_codes_and_preamble():
    enc = GcodeEncoder(GcodeConfig(engage="M03 S1000", disengage="M05", feed_speed=4000))
    assert enc.encode([PenDown(), PenUp()]) == "\nM03 S1000\nM05"
    assert enc.preamble() == "G90\nG17\nG21\nG1 F4000"
    assert enc.preamble(1500) == "G90\nG17\nG21\nG1 F1500"
