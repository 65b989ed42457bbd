"""
Tests for configuration loading and validation.
"""

import pytest

from rain_sim.rain_core.config_loader import (
    default_parameters,
    get_config,
    load_config,
    reload_config,
)
from rain_sim.rain_core.vector import Vector2


VALID_YAML = """
simulation:
  object_size: [2.0, 3.0]
  object_speed: 1.5
  scene_size: [50, 20]
  rain_speed: [0.5, -2.0]
  rain_density: 0.25
run:
  dt: 0.5
  max_steps: 40
"""


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def write_config(tmp_path):
    def _write(text: str):
        path = tmp_path / "sim_config.yaml"
        path.write_text(text)
        return str(path)
    return _write


class TestDefaultConfig:
    """Test the packaged configuration."""

    def test_packaged_matches_defaults(self, config):
        """sim_config.yaml holds the fixed runner parameters."""
        assert config.simulation == default_parameters()
        assert config.run.dt == pytest.approx(0.1)
        assert config.run.max_steps is None

    def test_default_parameters_values(self):
        params = default_parameters()

        assert params.object_size == Vector2(1.0, 1.0)
        assert params.object_speed == 0.5
        assert params.scene_size == Vector2(100.0, 10.0)
        assert params.rain_speed == Vector2(0.0, -1.0)
        assert params.rain_density == 1.0

    def test_config_is_immutable(self, config):
        with pytest.raises(AttributeError):
            config.simulation.object_speed = 2.0

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reload_config_replaces_cache(self, write_config):
        path = write_config(VALID_YAML)

        reloaded = reload_config(path)
        try:
            assert get_config() is reloaded
            assert reloaded.simulation.object_speed == 1.5
        finally:
            reload_config()


class TestLoadConfig:
    """Test parsing a user-supplied file."""

    def test_valid_file(self, write_config):
        config = load_config(write_config(VALID_YAML))

        assert config.simulation.object_size == Vector2(2.0, 3.0)
        assert config.simulation.scene_size == Vector2(50.0, 20.0)
        assert config.simulation.rain_speed == Vector2(0.5, -2.0)
        assert config.simulation.rain_density == 0.25
        assert config.run.dt == 0.5
        assert config.run.max_steps == 40

    def test_run_section_optional(self, write_config):
        text = VALID_YAML.split("run:")[0]
        config = load_config(write_config(text))

        assert config.run.dt == pytest.approx(0.1)
        assert config.run.max_steps is None

    def test_negative_values_allowed(self, write_config):
        """The step absorbs negative parameters, so loading accepts them."""
        text = VALID_YAML.replace("rain_density: 0.25", "rain_density: -4")
        config = load_config(write_config(text))

        assert config.simulation.rain_density == -4.0

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_missing_key(self, write_config):
        text = VALID_YAML.replace("  object_speed: 1.5\n", "")
        with pytest.raises(ValueError, match="object_speed"):
            load_config(write_config(text))

    def test_missing_simulation_section(self, write_config):
        with pytest.raises(ValueError, match="simulation"):
            load_config(write_config("run:\n  dt: 0.1\n"))

    def test_bad_vector_length(self, write_config):
        text = VALID_YAML.replace("[50, 20]", "[50, 20, 5]")
        with pytest.raises(ValueError, match="scene_size"):
            load_config(write_config(text))

    def test_non_numeric_value(self, write_config):
        text = VALID_YAML.replace("object_speed: 1.5", "object_speed: fast")
        with pytest.raises(ValueError, match="object_speed"):
            load_config(write_config(text))

    def test_non_positive_dt(self, write_config):
        text = VALID_YAML.replace("dt: 0.5", "dt: 0")
        with pytest.raises(ValueError, match="dt"):
            load_config(write_config(text))

    @pytest.mark.parametrize("value", ["[3]", "{a: 1}", ".inf", "2.5", "true", "many"])
    def test_non_integer_max_steps(self, write_config, value):
        """Anything but a whole number is rejected with ValueError."""
        text = VALID_YAML.replace("max_steps: 40", f"max_steps: {value}")
        with pytest.raises(ValueError, match="max_steps"):
            load_config(write_config(text))

    def test_integral_float_max_steps(self, write_config):
        text = VALID_YAML.replace("max_steps: 40", "max_steps: 40.0")
        config = load_config(write_config(text))

        assert config.run.max_steps == 40
        assert isinstance(config.run.max_steps, int)

    def test_negative_max_steps(self, write_config):
        text = VALID_YAML.replace("max_steps: 40", "max_steps: -1")
        with pytest.raises(ValueError, match="max_steps"):
            load_config(write_config(text))
