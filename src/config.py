from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import DEFAULT_REQUEST_TIMEOUT
from src.errors import UserInputError
from src.models import OutputFormat


@dataclass(frozen=True)
class Config:
    telegram_bot_token: str
    allowed_chat_id: str
    log_level: str
    anthropic_api_key: Optional[str]
    openai_api_key: Optional[str]
    default_output_format: OutputFormat
    request_timeout: float

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        token = os.getenv("TELEGRAM_BOT_TOKEN")
        chat_id = os.getenv("ALLOWED_CHAT_ID")
        log_level = os.getenv("LOG_LEVEL", "INFO")
        anthropic_api_key = os.getenv("ANTHROPIC_API_KEY") or None
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        raw_format = os.getenv("DEFAULT_OUTPUT_FORMAT", OutputFormat.MARKDOWN.value)
        raw_timeout = os.getenv("REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT))

        try:
            output_format = OutputFormat.parse(raw_format)
        except UserInputError as exc:
            raise ValueError(f"DEFAULT_OUTPUT_FORMAT: {exc}") from exc

        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ValueError(f"REQUEST_TIMEOUT must be a number, got {raw_timeout!r}") from exc

        return cls._validate(
            telegram_bot_token=token,
            allowed_chat_id=chat_id,
            log_level=log_level,
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            default_output_format=output_format,
            request_timeout=timeout,
        )

    @staticmethod
    def _validate(
        telegram_bot_token: Optional[str],
        allowed_chat_id: Optional[str],
        log_level: str,
        anthropic_api_key: Optional[str],
        openai_api_key: Optional[str],
        default_output_format: OutputFormat,
        request_timeout: float,
    ) -> "Config":
        match telegram_bot_token:
            case None | "":
                raise ValueError("TELEGRAM_BOT_TOKEN must be set in .env")
            case _:
                pass

        match allowed_chat_id:
            case None | "":
                raise ValueError("ALLOWED_CHAT_ID must be set in .env")
            case _:
                pass

        match request_timeout:
            case t if t <= 0:
                raise ValueError("REQUEST_TIMEOUT must be positive")
            case _:
                pass

        return Config(
            telegram_bot_token=telegram_bot_token,
            allowed_chat_id=allowed_chat_id,
            log_level=log_level,
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            default_output_format=default_output_format,
            request_timeout=request_timeout,
        )
