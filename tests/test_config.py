import pytest
from pydantic import ValidationError

from glyphcode.config import Config, FontConfig, GcodeConfig


def test_defaults():
    config = Config()
    assert config.font.font_size == 60
    assert config.font.round_corners is False
    assert config.gcode.engage == "M3"
    assert config.work_area.left == -500


def test_save_and_load(tmp_path):
    path = tmp_path / "config.json"
    config = Config(font=FontConfig(font_size=24, spacing=0.2), gcode=GcodeConfig(feed_speed=1200))
    config.save(path)

    loaded = Config.load(path)
    assert loaded == config
    assert loaded.font.font_size == 24
    assert loaded.gcode.feed_speed == 1200


@pytest.mark.parametrize("field", ["font_size", "chord_tolerance", "dot_size"])
def test_non_positive_font_settings_rejected(field):
    with pytest.raises(ValidationError):
        FontConfig(**{field: 0})


def test_non_positive_feed_rejected():
    with pytest.raises(ValidationError):
        GcodeConfig(feed_speed=-1)
