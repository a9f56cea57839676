"""OpenAITranscriptionClient — OpenAI GPT-4o vision backend."""
from typing import Optional

from openai import AsyncOpenAI

from src.constants import MAX_OUTPUT_TOKENS, OPENAI_VISION_MODEL
from src.models import ImagePayload
from src.transcription.client import TranscriptionClient


class OpenAITranscriptionClient(TranscriptionClient):
    credential_name = "OPENAI_API_KEY"

    async def _complete(self, api_key: str, payload: ImagePayload, prompt: str) -> Optional[str]:
        client = AsyncOpenAI(api_key=api_key, timeout=self._timeout)
        response = await client.chat.completions.create(
            model=OPENAI_VISION_MODEL,
            max_tokens=MAX_OUTPUT_TOKENS,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "image_url",
                            "image_url": {"url": payload.data_url},
                        },
                        {"type": "text", "text": prompt},
                    ],
                }
            ],
        )
        match response.choices:
            case []:
                return None
            case [first, *_]:
                return first.message.content
