"""All magic values live here — no inline literals anywhere else."""

# Remote model
CLAUDE_VISION_MODEL = "claude-sonnet-4-5-20250929"
OPENAI_VISION_MODEL = "gpt-4o"
# Generous ceiling so long transcriptions are not truncated.
MAX_OUTPUT_TOKENS = 8192
DEFAULT_REQUEST_TIMEOUT: float = 60.0

# Instructions sent alongside the image
PROMPT_EXTRACT = (
    "Extract all text from this image, including handwritten equations and any "
    "other visible text. Preserve line breaks and formatting as much as possible."
)
PROMPT_EXTRACT_MARKDOWN = (
    "Extract all text from this image, including handwritten equations and any "
    "other visible text. Preserve line breaks and formatting as much as possible, "
    "using Markdown for mathematical expressions and structure."
)

# Image encoding
DEFAULT_MIME_TYPE = "application/octet-stream"
DEFAULT_PHOTO_NAME = "photo.jpg"
DEFAULT_PHOTO_MIME = "image/jpeg"
DEFAULT_DOCUMENT_NAME = "image"

# Error messages (user-facing)
MSG_NO_IMAGE = "Please upload an image first."
MSG_NO_API_KEY = "%s is not configured — set it in .env to enable transcription."
MSG_EMPTY_RESULT = "No text was transcribed from the image."
MSG_TRANSPORT_FAILED = "Failed to transcribe image: %s"
MSG_IMAGE_READ_FAILED = "Could not read image %s: %s"
MSG_BAD_FORMAT = "Unknown output format %r — use 'markdown' or 'plain'."

# Log messages
MSG_BOT_STARTING = "Starting image text reader…"
MSG_BLOCKED_CHAT = "Blocked update from chat_id: %s"
MSG_STALE_DISCARDED = "Discarded stale response for %s (generation %d, current %d)"
MSG_TRANSITION = "Session → %s (generation %d)"
MSG_SEND_FAIL = "Telegram send failed: %s"

# Presentation
MSG_IDLE = "Send me an image and I'll transcribe the text in it."
MSG_LOADING = "Transcribing…"
MSG_ERROR_PREFIX = "Error: %s"
MSG_PREVIEW_HEADER = "Uploaded image: %s (%s)"
MSG_SUPERSEDED = "Superseded by a newer request."
MSG_FORMAT_SET = "Output format set to: %s"
MSG_FORMAT_USAGE = "Usage: /format markdown | /format plain"
FORMAT_LABELS = {
    "plainText": "Plain Text",
    "markdown": "Markdown",
}
# Telegram rejects messages longer than this.
TELEGRAM_MAX_MESSAGE_LENGTH = 4096

# Commands
CMD_FORMAT = "format"
CMD_RETRY = "retry"
CMD_STATUS = "status"
CMD_HELP = "help"

MSG_HELP = (
    "Image Text Reader — send an image, get its text back\n"
    "\n"
    "Commands:\n"
    "  /help              — show this message\n"
    "  /status            — current image, format and result\n"
    "  /format markdown   — transcribe as Markdown (default)\n"
    "  /format plain      — transcribe as plain text\n"
    "  /retry             — transcribe the current image again\n"
    "\n"
    "Media:\n"
    "  Photo              — transcribed automatically\n"
    "  Image as file      — keeps the original quality and file name\n"
    "\n"
    "Accepted formats: JPG, PNG, GIF, WEBP. Max file size: 10MB.\n"
)
