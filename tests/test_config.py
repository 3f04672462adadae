import pytest

from circletree import ConfigurationError, GlyphTemplate, LayoutConfig


def test_defaults():
    config = LayoutConfig()
    assert config.glyph_width == 7
    assert config.glyph_height == 4
    assert config.horizontal_gap == 3
    assert config.depth_gap == 6
    assert config.unit == 10
    assert (config.margin_x, config.margin_y) == (20, 10)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"horizontal_gap": -1},
        {"depth_gap": 0},
        {"margin_x": -5},
        {"margin_y": -1},
        {"depth_gap": "6"},
        {"horizontal_gap": 2.5},
        {"depth_gap": True},
        {"template": "circle"},
    ],
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        LayoutConfig(**kwargs)


def test_zero_gap_is_allowed():
    assert LayoutConfig(horizontal_gap=0).unit == GlyphTemplate().width
