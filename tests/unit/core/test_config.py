"""
Tests for settings and detection configuration validation.
"""

import pydantic
import pytest

from langsift.core.config.settings import Settings
from langsift.core.config.validation import (
    DetectionConfig,
    DetectionConfigLoader,
    load_detection_config,
)
from langsift.core.exceptions.custom_exceptions import ConfigurationError


class TestDetectionConfig:
    """Test cases for DetectionConfig."""

    def test_defaults(self):
        """Test default detection options"""
        config = DetectionConfig()

        assert config.alpha == 0.5
        assert config.alpha_width == 0.05
        assert config.n_trials == 7
        assert config.iteration_limit == 10000
        assert config.prob_threshold == 0.1
        assert config.conv_threshold == 0.99999
        assert config.base_freq == 10000
        assert config.max_results is None
        assert config.text_filter is None
        assert config.prior is None
        assert config.seed == 0

    def test_frozen(self):
        """Test the config cannot be modified"""
        config = DetectionConfig()

        with pytest.raises(pydantic.ValidationError):
            config.alpha = 1.0

    @pytest.mark.parametrize(
        "options",
        [
            {"n_trials": 0},
            {"prob_threshold": 1.5},
            {"base_freq": 0},
            {"max_results": -1},
            {"prior": [0.0, 0.0]},
            {"prior": [-1.0, 2.0]},
            {"unknown_option": True},
        ],
    )
    def test_invalid_options(self, options):
        """Test out-of-range options are rejected"""
        with pytest.raises(ConfigurationError) as exc_info:
            load_detection_config(options)

        assert exc_info.value.error_code == "CONFIG_VALIDATION_ERROR"
        assert exc_info.value.details["errors"]

    def test_overrides_ignore_none(self):
        """Test None overrides keep the defaults"""
        config = load_detection_config({"max_results": 3}, max_results=None, seed=4)

        assert config.max_results == 3
        assert config.seed == 4


class TestDetectionConfigLoader:
    """Test cases for loading configuration files."""

    def test_yaml_file(self, tmp_path):
        """Test loading options from YAML"""
        path = tmp_path / "detection.yaml"
        path.write_text("n_trials: 3\ntext_filter: '[a-z ]+'\n")

        config = DetectionConfigLoader.load_file(str(path), max_results=2)

        assert config.n_trials == 3
        assert config.text_filter == "[a-z ]+"
        assert config.max_results == 2

    def test_json_file(self, tmp_path):
        """Test loading options from JSON"""
        path = tmp_path / "detection.json"
        path.write_text('{"prior": [0.25, 0.75]}')

        assert DetectionConfigLoader.load_file(str(path)).prior == (0.25, 0.75)

    def test_empty_file(self, tmp_path):
        """Test an empty file gives the defaults"""
        path = tmp_path / "detection.yml"
        path.write_text("")

        assert DetectionConfigLoader.load_file(str(path)) == DetectionConfig()

    def test_missing_file(self, tmp_path):
        """Test a missing config file fails"""
        with pytest.raises(ConfigurationError):
            DetectionConfigLoader.load_config(str(tmp_path / "missing.yaml"))

    def test_unsupported_format(self, tmp_path):
        """Test unknown config extensions are rejected"""
        path = tmp_path / "detection.toml"
        path.write_text("n_trials = 3")

        with pytest.raises(ConfigurationError):
            DetectionConfigLoader.load_config(str(path))


class TestSettings:
    """Test cases for application settings."""

    def test_language_list(self):
        """Test the comma separated language setting"""
        assert Settings(LANGUAGES=" en, de ,,fr").language_list == ["en", "de", "fr"]
        assert Settings(LANGUAGES="").language_list is None

    def test_log_level_normalized(self):
        """Test log level is uppercased"""
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        """Test an unknown log level is rejected"""
        with pytest.raises(pydantic.ValidationError):
            Settings(LOG_LEVEL="LOUD")
