import base64

from src.errors import ImageReadError, UserInputError
from src.image_encoder import encode_bytes


def test_encode_bytes_base64_encodes_data():
    payload = encode_bytes(b"\x89PNG-bytes", "notes.png")

    assert base64.b64decode(payload.data) == b"\x89PNG-bytes"
    assert payload.file_name == "notes.png"


def test_encode_bytes_mime_from_file_name():
    payload = encode_bytes(b"bytes", "notes.png", declared_mime="image/jpeg")
    assert payload.mime_type == "image/png"


def test_encode_bytes_falls_back_to_declared_mime():
    payload = encode_bytes(b"bytes", "scan", declared_mime="image/webp")
    assert payload.mime_type == "image/webp"


def test_encode_bytes_without_any_mime_uses_default():
    payload = encode_bytes(b"bytes", "scan")
    assert payload.mime_type == "application/octet-stream"


def test_encode_bytes_jpeg_name():
    payload = encode_bytes(b"\xff\xd8\xff-jpeg", "blank.jpg")
    assert payload.mime_type == "image/jpeg"


def test_read_error_is_a_user_input_error():
    assert issubclass(ImageReadError, UserInputError)
