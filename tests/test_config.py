"""
Unit tests for configuration loading, saving and logging setup.
"""

import logging

import pytest
from pydantic import ValidationError

from sphcollection.config import (
    Config,
    LoggingConfig,
    PrecisionConfig,
    get_config,
    reset_config,
    set_config,
)
from sphcollection.core.precision import Precision
from sphcollection.utils import LOGGER_NAME, setup_logging


class TestConfigDefaults:
    """Test default configuration values."""

    def test_defaults(self):
        """Test the default configuration."""
        config = Config()
        assert config.precision.default is Precision.DOUBLE
        assert config.registry.load_entry_points is True
        assert config.registry.entry_point_group == "sphcollection.functions"
        assert config.logging.level == "WARNING"

    def test_precision_alias(self):
        """Test precision aliases are accepted."""
        assert PrecisionConfig(default="f4").default is Precision.SINGLE

    def test_invalid_precision(self):
        """Test unknown precision names are rejected."""
        with pytest.raises(ValidationError):
            PrecisionConfig(default="half")

    def test_level_case_insensitive(self):
        """Test lower-case logging levels are normalized."""
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_extra_keys_forbidden(self):
        """Test unknown keys are rejected."""
        with pytest.raises(ValidationError):
            Config(quadrature={"order": 5})


class TestConfigFiles:
    """Test loading and saving configuration files."""

    def _custom(self) -> Config:
        return Config(
            precision={"default": "single"},
            registry={"load_entry_points": False},
            logging={"level": "INFO"},
        )

    def test_toml_round_trip(self, tmp_path):
        """Test saving and loading TOML."""
        path = tmp_path / "sphcollection.toml"
        self._custom().to_toml(path)
        assert Config.from_file(path) == self._custom()

    def test_yaml_round_trip(self, tmp_path):
        """Test saving and loading YAML."""
        path = tmp_path / "sphcollection.yaml"
        self._custom().to_yaml(path)
        assert Config.from_file(path) == self._custom()

    def test_partial_toml(self, tmp_path):
        """Test missing sections take their defaults."""
        path = tmp_path / "partial.toml"
        path.write_text('[precision]\ndefault = "float32"\n')
        config = Config.from_toml(path)
        assert config.precision.default is Precision.SINGLE
        assert config.logging.level == "WARNING"

    def test_empty_yaml(self, tmp_path):
        """Test an empty YAML file gives the default configuration."""
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert Config.from_yaml(path) == Config()

    def test_unsupported_format(self, tmp_path):
        """Test unknown suffixes are rejected."""
        with pytest.raises(ValueError, match="Unsupported config format"):
            Config.from_file(tmp_path / "config.json")

    def test_missing_file(self, tmp_path):
        """Test missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            Config.from_toml(tmp_path / "missing.toml")
        with pytest.raises(FileNotFoundError):
            Config.from_yaml(tmp_path / "missing.yaml")


class TestActiveConfig:
    """Test the process-wide active configuration."""

    def test_set_and_reset(self):
        """Test replacing and restoring the active configuration."""
        custom = Config(precision={"default": "single"})
        set_config(custom)
        assert get_config() is custom

        reset_config()
        assert get_config().precision.default is Precision.DOUBLE

    def test_get_config_is_stable(self):
        """Test the default configuration is created once."""
        assert get_config() is get_config()


class TestSetupLogging:
    """Test logger configuration."""

    @pytest.fixture(autouse=True)
    def _restore_logger(self):
        logger = logging.getLogger(LOGGER_NAME)
        handlers = list(logger.handlers)
        level = logger.level
        yield
        logger.handlers = handlers
        logger.setLevel(level)

    def test_explicit_level(self):
        """Test an explicit level is applied."""
        logger = setup_logging("DEBUG")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG

    def test_level_from_config(self):
        """Test the default level comes from the active config."""
        set_config(Config(logging={"level": "ERROR"}))
        assert setup_logging().level == logging.ERROR

    def test_single_stream_handler(self):
        """Test repeated setup does not stack handlers."""
        setup_logging("INFO")
        setup_logging("INFO")
        logger = logging.getLogger(LOGGER_NAME)
        streams = [
            h for h in logger.handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
        ]
        assert len(streams) == 1
