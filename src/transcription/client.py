"""TranscriptionClient — abstract base for image-to-text backends.

``transcribe`` owns the error contract shared by every backend: missing
credential, remote failure and empty result each surface as their own
``TranscriptionError``. Backends only implement ``_complete``.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from src.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    MSG_EMPTY_RESULT,
    MSG_NO_API_KEY,
    MSG_TRANSPORT_FAILED,
    PROMPT_EXTRACT,
    PROMPT_EXTRACT_MARKDOWN,
)
from src.errors import ConfigurationError, EmptyResultError, TransportError
from src.models import ImagePayload, OutputFormat

logger = logging.getLogger(__name__)


def instruction_for(output_format: OutputFormat) -> str:
    match output_format:
        case OutputFormat.MARKDOWN:
            return PROMPT_EXTRACT_MARKDOWN
        case OutputFormat.PLAIN_TEXT:
            return PROMPT_EXTRACT


class TranscriptionClient(ABC):
    credential_name = "API key"

    def __init__(
        self, api_key: Optional[str], timeout: float = DEFAULT_REQUEST_TIMEOUT
    ) -> None:
        self._api_key = api_key
        self._timeout = timeout

    async def transcribe(self, payload: ImagePayload, output_format: OutputFormat) -> str:
        """Send one request for ``payload`` and return the extracted text. Raises TranscriptionError."""
        match self._api_key:
            case None | "":
                raise ConfigurationError(MSG_NO_API_KEY % self.credential_name)
            case _:
                pass

        prompt = instruction_for(output_format)
        try:
            text = await self._complete(self._api_key, payload, prompt)
        except Exception as exc:
            logger.exception("Transcription request failed for %s", payload.file_name)
            raise TransportError(MSG_TRANSPORT_FAILED % exc, exc) from exc

        match (text or "").strip():
            case "":
                raise EmptyResultError(MSG_EMPTY_RESULT)
            case _:
                return text

    @abstractmethod
    async def _complete(self, api_key: str, payload: ImagePayload, prompt: str) -> Optional[str]:
        """Perform the remote call and return the raw text, or None when there is none."""
        ...
