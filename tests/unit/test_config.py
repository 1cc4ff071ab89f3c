"""
Unit tests for MinimizerConfig and YAML loading.
"""
import dataclasses

import pytest

from pyncg.core import (
    DEFAULT_EPSILON,
    DEFAULT_INITIAL_STEP,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_SAFE_MIN,
    MinimizerConfig,
    load_config,
)
from pyncg.core.config import load_yaml


class TestMinimizerConfig:
    """Tests for defaults, validation and dict conversion."""

    def test_defaults(self) -> None:
        config = MinimizerConfig()
        assert config.epsilon == DEFAULT_EPSILON == 1e-6
        assert config.safe_min == DEFAULT_SAFE_MIN == 4.503599e15
        assert config.max_iterations == DEFAULT_MAX_ITERATIONS
        assert config.initial_step == DEFAULT_INITIAL_STEP == 1.0
        assert config.root_precision == 1e-15

    def test_thresholds(self) -> None:
        config = MinimizerConfig(epsilon=1e-8, safe_min=2.0)
        assert config.relative_threshold == pytest.approx(1e-6)
        assert config.absolute_threshold == pytest.approx(200.0)

    @pytest.mark.parametrize(
        "key", ["epsilon", "safe_min", "max_iterations", "initial_step", "root_precision"]
    )
    def test_non_positive_rejected(self, key) -> None:
        with pytest.raises(ValueError, match=key):
            MinimizerConfig(**{key: 0})

    def test_frozen(self) -> None:
        config = MinimizerConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.epsilon = 1.0

    def test_from_dict_fills_defaults(self) -> None:
        config = MinimizerConfig.from_dict({"epsilon": "1e-9", "max_iterations": 50.0})
        assert config.epsilon == 1e-9
        assert config.max_iterations == 50
        assert isinstance(config.max_iterations, int)
        assert config.safe_min == DEFAULT_SAFE_MIN

    def test_from_dict_unknown_key(self) -> None:
        with pytest.raises(ValueError, match="Unknown config keys: tolerance"):
            MinimizerConfig.from_dict({"tolerance": 1e-3})

    @pytest.mark.parametrize("value", [[1, 2], {"a": 1}, None, "tiny"])
    def test_from_dict_mistyped_value(self, value) -> None:
        with pytest.raises(ValueError, match="Invalid value for epsilon"):
            MinimizerConfig.from_dict({"epsilon": value})

    def test_to_dict_round_trip(self) -> None:
        config = MinimizerConfig(epsilon=1e-10, safe_min=1e-300, initial_step=0.25)
        assert MinimizerConfig.from_dict(config.to_dict()) == config


class TestLoadConfig:
    """Tests for reading tunables from YAML files."""

    def test_nested_section(self, tmp_path) -> None:
        path = tmp_path / "run.yaml"
        path.write_text(
            "problem: booth\n"
            "minimizer:\n"
            "  epsilon: 1.0e-10\n"
            "  max_iterations: 500\n"
        )
        config = load_config(path)
        assert config.epsilon == 1e-10
        assert config.max_iterations == 500

    def test_flat_mapping(self, tmp_path) -> None:
        path = tmp_path / "flat.yaml"
        path.write_text("safe_min: 1.0e-300\ninitial_step: 0.5\n")
        config = load_config(str(path))
        assert config.safe_min == 1e-300
        assert config.initial_step == 0.5

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml(path) == {}
        assert load_config(path) == MinimizerConfig()

    def test_non_mapping_rejected(self, tmp_path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_value_rejected(self, tmp_path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("minimizer:\n  epsilon: -1\n")
        with pytest.raises(ValueError, match="epsilon must be positive"):
            load_config(path)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(OSError):
            load_config(tmp_path / "missing.yaml")
