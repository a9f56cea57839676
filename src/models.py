"""Value types shared by the encoder, the clients and the session."""
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

from src.constants import MSG_BAD_FORMAT
from src.errors import UserInputError


@dataclass(frozen=True)
class ImagePayload:
    data: str
    mime_type: str
    file_name: str

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


class OutputFormat(str, Enum):
    PLAIN_TEXT = "plainText"
    MARKDOWN = "markdown"

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        """Map a user spelling (``plain``, ``md``, ...) to a format. Raises UserInputError."""
        match value.strip().lower():
            case "plain" | "plaintext" | "plain_text" | "text" | "txt":
                return cls.PLAIN_TEXT
            case "markdown" | "md":
                return cls.MARKDOWN
            case _:
                raise UserInputError(MSG_BAD_FORMAT % value)


class RequestStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


# ── session state: one variant per status, payload only where it belongs ─────


@dataclass(frozen=True)
class IdleState:
    status: ClassVar[RequestStatus] = RequestStatus.IDLE


@dataclass(frozen=True)
class LoadingState:
    status: ClassVar[RequestStatus] = RequestStatus.LOADING


@dataclass(frozen=True)
class SuccessState:
    text: str
    status: ClassVar[RequestStatus] = RequestStatus.SUCCESS


@dataclass(frozen=True)
class ErrorState:
    message: str
    status: ClassVar[RequestStatus] = RequestStatus.ERROR


SessionState = IdleState | LoadingState | SuccessState | ErrorState


@dataclass(frozen=True)
class SessionSnapshot:
    image: Optional[ImagePayload]
    output_format: OutputFormat
    state: SessionState
    generation: int
