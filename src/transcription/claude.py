"""ClaudeTranscriptionClient — Anthropic Claude vision backend."""
from typing import Optional

from anthropic import AsyncAnthropic

from src.constants import CLAUDE_VISION_MODEL, MAX_OUTPUT_TOKENS
from src.models import ImagePayload
from src.transcription.client import TranscriptionClient


class ClaudeTranscriptionClient(TranscriptionClient):
    credential_name = "ANTHROPIC_API_KEY"

    async def _complete(self, api_key: str, payload: ImagePayload, prompt: str) -> Optional[str]:
        client = AsyncAnthropic(api_key=api_key, timeout=self._timeout)
        message = await client.messages.create(
            model=CLAUDE_VISION_MODEL,
            max_tokens=MAX_OUTPUT_TOKENS,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image",
                            "source": {
                                "type": "base64",
                                "media_type": payload.mime_type,
                                "data": payload.data,
                            },
                        },
                        {"type": "text", "text": prompt},
                    ],
                }
            ],
        )
        return "".join(
            block.text for block in message.content if block.type == "text"
        )
