"""Config loading from the environment"""
import pytest
from src.config import Config
from src.models import OutputFormat


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr("src.config.load_dotenv", lambda **_: None)
    for name in (
        "ANTHROPIC_API_KEY",
        "OPENAI_API_KEY",
        "DEFAULT_OUTPUT_FORMAT",
        "REQUEST_TIMEOUT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def set_required(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "bot123:ABC")
    monkeypatch.setenv("ALLOWED_CHAT_ID", "987654321")


def test_config_from_env_success(monkeypatch):
    """Happy-path: all required env vars present."""
    set_required(monkeypatch)
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test")

    config = Config.from_env()

    assert config.telegram_bot_token == "bot123:ABC"
    assert config.allowed_chat_id == "987654321"
    assert config.anthropic_api_key == "sk-ant-test"


def test_config_missing_token_fails(monkeypatch):
    """Missing TELEGRAM_BOT_TOKEN must raise."""
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    monkeypatch.setenv("ALLOWED_CHAT_ID", "123456789")

    with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
        Config.from_env()


def test_config_missing_chat_id_fails(monkeypatch):
    """Missing ALLOWED_CHAT_ID must raise."""
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "bot123:ABC")
    monkeypatch.delenv("ALLOWED_CHAT_ID", raising=False)

    with pytest.raises(ValueError, match="ALLOWED_CHAT_ID"):
        Config.from_env()


def test_config_missing_api_keys_is_not_fatal(monkeypatch):
    """Credentials are only required when a transcription is attempted."""
    set_required(monkeypatch)

    config = Config.from_env()

    assert config.anthropic_api_key is None
    assert config.openai_api_key is None


def test_config_blank_api_key_becomes_none(monkeypatch):
    set_required(monkeypatch)
    monkeypatch.setenv("OPENAI_API_KEY", "")

    config = Config.from_env()

    assert config.openai_api_key is None


def test_config_immutable():
    """Frozen dataclass: attribute assignment must fail."""
    config = Config(
        telegram_bot_token="token",
        allowed_chat_id="123456789",
        log_level="INFO",
        anthropic_api_key=None,
        openai_api_key=None,
        default_output_format=OutputFormat.MARKDOWN,
        request_timeout=60.0,
    )

    with pytest.raises(Exception):
        config.telegram_bot_token = "other"


def test_config_defaults(monkeypatch):
    """Optional fields have sensible defaults."""
    set_required(monkeypatch)

    config = Config.from_env()

    assert config.log_level == "INFO"
    assert config.default_output_format is OutputFormat.MARKDOWN
    assert config.request_timeout == 60.0


def test_config_default_output_format_from_env(monkeypatch):
    set_required(monkeypatch)
    monkeypatch.setenv("DEFAULT_OUTPUT_FORMAT", "plain")

    config = Config.from_env()

    assert config.default_output_format is OutputFormat.PLAIN_TEXT


def test_config_bad_output_format_fails(monkeypatch):
    set_required(monkeypatch)
    monkeypatch.setenv("DEFAULT_OUTPUT_FORMAT", "html")

    with pytest.raises(ValueError, match="DEFAULT_OUTPUT_FORMAT"):
        Config.from_env()


def test_config_request_timeout_from_env(monkeypatch):
    set_required(monkeypatch)
    monkeypatch.setenv("REQUEST_TIMEOUT", "12.5")

    config = Config.from_env()

    assert config.request_timeout == 12.5


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_config_bad_request_timeout_fails(monkeypatch, raw):
    set_required(monkeypatch)
    monkeypatch.setenv("REQUEST_TIMEOUT", raw)

    with pytest.raises(ValueError, match="REQUEST_TIMEOUT"):
        Config.from_env()
