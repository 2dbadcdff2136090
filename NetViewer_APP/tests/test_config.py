"""YAML configuration loading, validation and feature flags."""

import pytest

from src.config import FeatureFlags, ViewerConfig, load_config
from src.models.exceptions import InvalidConfigError


def write(tmp_path, text):
    path = tmp_path / "viewer.yaml"
    path.write_text(text)
    return path


def test_defaults_without_file():
    config = load_config()
    assert config == ViewerConfig()
    assert config.physics.drag == 0.75
    assert config.physics.time_step == 0.3
    assert config.camera.smoothness == 0.9
    assert config.camera.view_padding == 1.2


def test_empty_file_gives_defaults(tmp_path):
    assert load_config(write(tmp_path, "")) == ViewerConfig()


def test_partial_sections_override_defaults(tmp_path):
    config = load_config(write(tmp_path, """
physics:
  drag: 1.5
style:
  width: 640
  node_fill: [10, 20, 30, 40]
"""))
    assert config.physics.drag == 1.5
    assert config.physics.edge_strength == 1.0
    assert config.style.width == 640
    assert config.style.node_fill == (10, 20, 30, 40)


@pytest.mark.parametrize("text", [
    "physics:\n  gravity: 9.8\n",
    "physics:\n  spring_strength: 1.0\n",
    "physics:\n  time_step: 0\n",
    "camera:\n  smoothness: 1.0\n",
    "camera:\n  min_zoom: 5\n  max_zoom: 2\n",
    "style:\n  edge_stroke: [0, 300]\n",
    "style: 3\n",
    "- a list\n",
])
def test_invalid_config_rejected(tmp_path, text):
    with pytest.raises(InvalidConfigError):
        load_config(write(tmp_path, text))


def test_invalid_config_is_value_error(tmp_path):
    with pytest.raises(ValueError):
        load_config(write(tmp_path, "physics:\n  drag: -1\n"))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


def test_validate_reports_section():
    config = ViewerConfig()
    config.style.width = 0
    ok, message = config.validate()
    assert not ok
    assert message.startswith("style:")


def test_feature_flag_toggles():
    assert FeatureFlags.as_dict() == {"DRAW_EDGES": True, "AUTO_CENTRE": True}
    assert FeatureFlags.toggle_auto_centre() is False
    assert FeatureFlags.toggle_draw_edges() is False
    FeatureFlags.defaults()
    assert FeatureFlags.AUTO_CENTRE and FeatureFlags.DRAW_EDGES
