from loguru import logger

from app_logger import setup_logger
from config_reader import Settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("ASSET_STRICT_CODE_CHARSET", raising=False)
    monkeypatch.delenv("ASSET_LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.strict_code_charset is True
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("ASSET_STRICT_CODE_CHARSET", "false")
    monkeypatch.setenv("ASSET_LOG_LEVEL", "DEBUG")
    settings = Settings(_env_file=None)
    assert settings.strict_code_charset is False
    assert settings.log_level == "DEBUG"


def test_setup_logger_file_sink(tmp_path):
    log_file = tmp_path / "asset.log"
    setup_logger(level="DEBUG", log_file=str(log_file))
    logger.debug("codec ready")
    setup_logger(log_file=None)
    assert "codec ready" in log_file.read_text()
