import pytest

from ascii_life.config import PRESETS, LifeConfig, from_preset


def test_defaults():
    config = LifeConfig()
    assert (config.width, config.height) == (64, 32)
    assert config.p_alive == pytest.approx(0.2)
    assert (config.alive_glyph, config.empty_glyph) == ("+", "_")
    assert config.num_cells == 64 * 32


def test_presets_cover_both_deployments():
    assert (PRESETS["classic"].height, PRESETS["classic"].p_alive) == (32, 0.2)
    assert (PRESETS["square"].height, PRESETS["square"].p_alive) == (64, 0.5)
    assert PRESETS["square"].empty_glyph == "."


def test_from_preset_applies_overrides():
    config = from_preset("square", width=20, seed=None)
    assert (config.width, config.height) == (20, 64)
    assert config.seed is None
    assert PRESETS["square"].width == 64


def test_from_preset_unknown_name():
    with pytest.raises(ValueError, match="Unknown preset"):
        from_preset("toroidal")


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": -3},
    {"width": 2.5},
    {"p_alive": 1.5},
    {"p_alive": -0.1},
    {"interval": -1.0},
    {"alive_glyph": "++"},
    {"empty_glyph": ""},
    {"alive_glyph": "_"},
])
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        LifeConfig(**kwargs)


def test_invalid_override_rejected():
    with pytest.raises(ValueError):
        from_preset("classic", p_alive=3.0)
