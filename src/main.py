"""Entry point — wires Config → TranscriptionClient → TelegramClient."""
import logging

from rich.logging import RichHandler

from src.config import Config
from src.constants import MSG_BOT_STARTING
from src.telegram.client import TelegramClient
from src.transcription.claude import ClaudeTranscriptionClient
from src.transcription.client import TranscriptionClient
from src.transcription.openai import OpenAITranscriptionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))
    # httpx logs every polling request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_transcriber(config: Config) -> TranscriptionClient:
    """Prefer Claude, fall back to OpenAI. With no key at all the Claude client
    is still returned so each attempt fails with a ConfigurationError."""
    match (config.anthropic_api_key, config.openai_api_key):
        case (str() as k, _) if k:
            return ClaudeTranscriptionClient(k, timeout=config.request_timeout)
        case (_, str() as k) if k:
            return OpenAITranscriptionClient(k, timeout=config.request_timeout)
        case _:
            return ClaudeTranscriptionClient(None, timeout=config.request_timeout)


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info(MSG_BOT_STARTING)

    client = TelegramClient(config, transcriber=build_transcriber(config))
    client.run()


if __name__ == "__main__":
    main()
