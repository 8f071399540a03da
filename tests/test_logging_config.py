"""Tests for environment-driven logging configuration."""

from unittest.mock import patch

import pytest

from hookstorm.config import LoggingConfig


class TestLoggingConfig:
    """Test the dictConfig built from LOG_LEVEL and LOG_FORMAT."""
    
    @pytest.fixture
    def applied_config(self):
        """Run configure() and return the dict it hands to dictConfig."""
        with patch("logging.config.dictConfig") as dict_config:
            def configure():
                LoggingConfig.configure()
                return dict_config.call_args.args[0]
            
            yield configure
    
    def test_defaults(self, monkeypatch, applied_config):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        
        config = applied_config()
        
        assert config["root"]["level"] == "INFO"
        assert config["formatters"]["default"]["format"].startswith("%(asctime)s - %(levelname)s")
    
    def test_level_and_format_from_environment(self, monkeypatch, applied_config):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "json")
        
        config = applied_config()
        
        assert config["root"]["level"] == "DEBUG"
        assert config["formatters"]["default"]["format"].startswith('{"time"')
    
    def test_invalid_values_fall_back(self, monkeypatch, applied_config):
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        monkeypatch.setenv("LOG_FORMAT", "xml")
        
        config = applied_config()
        
        assert config["root"]["level"] == "INFO"
        assert config["handlers"]["console"]["level"] == "INFO"
    
    def test_noisy_libraries_log_errors_only(self, monkeypatch, applied_config):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        
        config = applied_config()
        
        for module in LoggingConfig.ERROR_ONLY_MODULES:
            assert config["loggers"][module]["level"] == "ERROR"
            assert config["loggers"][module]["propagate"] is False
