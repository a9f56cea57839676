"""Renders session snapshots to chat text. No decisions are made here."""
from src.constants import (
    FORMAT_LABELS,
    MSG_ERROR_PREFIX,
    MSG_IDLE,
    MSG_LOADING,
    MSG_PREVIEW_HEADER,
    TELEGRAM_MAX_MESSAGE_LENGTH,
)
from src.models import (
    ErrorState,
    IdleState,
    LoadingState,
    SessionSnapshot,
    SessionState,
    SuccessState,
)


def render_state(state: SessionState) -> str:
    match state:
        case IdleState():
            return MSG_IDLE
        case LoadingState():
            return MSG_LOADING
        case ErrorState(message=message):
            return MSG_ERROR_PREFIX % message
        case SuccessState(text=text):
            return text


def render_preview(snapshot: SessionSnapshot) -> str:
    """Header naming the selected image and format, or empty when nothing is selected."""
    match snapshot.image:
        case None:
            return ""
        case image:
            return MSG_PREVIEW_HEADER % (
                image.file_name,
                FORMAT_LABELS[snapshot.output_format.value],
            )


def render(snapshot: SessionSnapshot) -> str:
    match render_preview(snapshot):
        case "":
            return render_state(snapshot.state)
        case header:
            return f"{header}\n\n{render_state(snapshot.state)}"


def split_message(text: str, limit: int = TELEGRAM_MAX_MESSAGE_LENGTH) -> list[str]:
    """Split ``text`` into chunks of at most ``limit`` chars, preferring line breaks."""
    chunks: list[str] = []
    remaining = text
    while len(remaining) > limit:
        cut = remaining.rfind("\n", 0, limit)
        match cut:
            case n if n <= 0:
                chunks.append(remaining[:limit])
                remaining = remaining[limit:]
            case n:
                chunks.append(remaining[:n])
                remaining = remaining[n + 1:]
    chunks.append(remaining)
    # Telegram rejects whitespace-only messages
    return list(filter(str.strip, chunks))
