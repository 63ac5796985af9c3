"""
Configuration system tests
Covers AppConfig loading, validation and defaults
"""

import json

import pytest
import yaml

from pktprobe.common.exceptions import ConfigurationError
from pktprobe.config.settings import AppConfig, LoggingSettings, PayloadSettings


class TestAppConfig:
    """Application configuration tests"""

    def test_default_initialization(self):
        config = AppConfig.default()
        assert isinstance(config.payloads, PayloadSettings)
        assert isinstance(config.logging, LoggingSettings)
        assert config.payloads.max_template_size == 1500
        assert config.payloads.max_frame_size == 65536
        assert config.payloads.strict_payload_size is False
        assert config.payloads.load_builtin_payloads is True
        assert config.logging.log_level == "INFO"

    def test_missing_file_gives_defaults(self, temp_dir):
        config = AppConfig.load(temp_dir / "absent.yaml")
        assert config == AppConfig.default()

    def test_load_yaml(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text(
            yaml.safe_dump({"payloads": {"max_template_size": 512}, "logging": {"log_level": "debug"}}),
            encoding="utf-8",
        )
        config = AppConfig.load(path)
        assert config.payloads.max_template_size == 512
        assert config.logging.log_level == "DEBUG"

    def test_load_json(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"payloads": {"strict_payload_size": True}}), encoding="utf-8")
        assert AppConfig.load(path).payloads.strict_payload_size is True

    def test_empty_file(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert AppConfig.load(path) == AppConfig.default()

    def test_save_and_reload(self, temp_dir):
        config = AppConfig.default()
        config.payloads.max_frame_size = 9000
        path = config.save(temp_dir / "nested" / "config.yaml")

        assert path.exists()
        assert AppConfig.load(path).payloads.max_frame_size == 9000


class TestConfigValidation:
    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError):
            AppConfig.from_dict({"logging": {"log_level": "LOUD"}})

    def test_template_size_bounds(self):
        with pytest.raises(ConfigurationError):
            AppConfig.from_dict({"payloads": {"max_template_size": 0}})

    def test_assignment_is_validated(self):
        settings = PayloadSettings()
        with pytest.raises(ValueError):
            settings.max_template_size = -1

    def test_frame_size_bound(self):
        with pytest.raises(ConfigurationError):
            AppConfig.from_dict({"payloads": {"max_frame_size": 70000}})

    def test_non_mapping_file(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            AppConfig.load(path)

    def test_unparseable_file(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            AppConfig.load(path)
