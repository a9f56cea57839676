"""ImageEncoder — turns an uploaded image into an ImagePayload."""
import base64
import mimetypes
from typing import Optional

from src.constants import DEFAULT_MIME_TYPE
from src.models import ImagePayload


def _resolve_mime(parsed: Optional[str], declared: Optional[str]) -> str:
    match (parsed, declared):
        case (str() as m, _) if m:
            return m
        case (_, str() as m) if m:
            return m
        case _:
            return DEFAULT_MIME_TYPE


def encode_bytes(
    data: bytes, file_name: str, declared_mime: Optional[str] = None
) -> ImagePayload:
    """Base64-encode raw image bytes; MIME comes from the file name, else the declared type."""
    guessed, _ = mimetypes.guess_type(file_name)
    return ImagePayload(
        data=base64.standard_b64encode(data).decode(),
        mime_type=_resolve_mime(guessed, declared_mime),
        file_name=file_name,
    )
