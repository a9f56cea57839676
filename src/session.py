"""TranscriptionSession — the state machine between image selection and display.

Every change of image or output format funnels into ``request_transcription``.
Each request captures a generation number; when the client resolves, the
result is applied only if no newer request has been made since. Stale
responses are dropped locally, nothing is cancelled on the remote side.

Must be driven from inside a running event loop.
"""
import asyncio
import logging
from typing import Optional

from src.constants import (
    MSG_NO_IMAGE,
    MSG_STALE_DISCARDED,
    MSG_TRANSITION,
    MSG_TRANSPORT_FAILED,
)
from src.errors import TranscriptionError, UserInputError
from src.models import (
    ErrorState,
    IdleState,
    ImagePayload,
    LoadingState,
    OutputFormat,
    SessionSnapshot,
    SessionState,
    SuccessState,
)
from src.transcription.client import TranscriptionClient

logger = logging.getLogger(__name__)


class TranscriptionSession:

    def __init__(
        self,
        client: TranscriptionClient,
        output_format: OutputFormat = OutputFormat.MARKDOWN,
    ) -> None:
        self._client = client
        self._image: Optional[ImagePayload] = None
        self._format = output_format
        self._state: SessionState = IdleState()
        self._generation = 0

    # ── read side ─────────────────────────────────────────────────────────────

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            image=self._image,
            output_format=self._format,
            state=self._state,
            generation=self._generation,
        )

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def image(self) -> Optional[ImagePayload]:
        return self._image

    @property
    def output_format(self) -> OutputFormat:
        return self._format

    # ── mutations ─────────────────────────────────────────────────────────────

    def select_image(self, payload: ImagePayload) -> Optional["asyncio.Task[bool]"]:
        """Store a new image and start transcribing it."""
        self._image = payload
        self._set_state(IdleState())
        return self.request_transcription()

    def set_output_format(self, output_format: OutputFormat) -> Optional["asyncio.Task[bool]"]:
        """Switch format; re-transcribes the current image when the format actually changes."""
        match (output_format == self._format, self._image):
            case (True, _):
                return None
            case (False, None):
                self._format = output_format
                return None
            case _:
                self._format = output_format
                return self.request_transcription()

    def request_transcription(self) -> Optional["asyncio.Task[bool]"]:
        """Start a request for the current (image, format) pair.

        Returns the task driving it, whose result says whether the response
        was applied (False when a newer request superseded it), or None when
        there is no image to transcribe.
        """
        match self._image:
            case None:
                self._set_state(ErrorState(str(UserInputError(MSG_NO_IMAGE))))
                return None
            case payload:
                self._generation += 1
                self._set_state(LoadingState())
                return asyncio.create_task(
                    self._run(self._generation, payload, self._format)
                )

    # ── internals ─────────────────────────────────────────────────────────────

    async def _run(
        self, generation: int, payload: ImagePayload, output_format: OutputFormat
    ) -> bool:
        try:
            text = await self._client.transcribe(payload, output_format)
            outcome: SessionState = SuccessState(text)
        except TranscriptionError as exc:
            outcome = ErrorState(str(exc))
        except Exception as exc:
            logger.exception("Transcription client failed for %s", payload.file_name)
            outcome = ErrorState(MSG_TRANSPORT_FAILED % exc)

        match generation == self._generation:
            case False:
                logger.info(MSG_STALE_DISCARDED, payload.file_name, generation, self._generation)
                return False
            case True:
                self._set_state(outcome)
                return True

    def _set_state(self, state: SessionState) -> None:
        self._state = state
        logger.debug(MSG_TRANSITION, state.status.value, self._generation)
