"""
Gemini implementation of the generative-AI backend.

Uses the asyncio surface of the google-genai SDK (`client.aio`), so none of the
operations block the event loop while waiting on the remote service.
"""

import base64
from typing import Any, Optional, Union

from google import genai
from google.genai import types

from ..config import Settings, get_settings
from ..utils.log_utils import get_logger
from .base import APIError, GenAIBackend

logger = get_logger(__name__)


class GeminiClient(GenAIBackend):
    """Client for Google's Gemini API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        image_mime_type: str = "image/jpeg",
        client: Optional[Any] = None,
    ):
        """Initialize Gemini client.

        The SDK client is created on first use, so a missing key only fails
        once a request is made.

        Args:
            api_key: Google API key. Empty string when not configured.
            image_mime_type: MIME type sent with inline images.
            client: Pre-built `genai.Client` (or a stand-in with the same `aio` surface).
        """
        self.api_key = api_key or ""
        self.image_mime_type = image_mime_type
        self._client = client

    @property
    def client(self) -> Any:
        """Get the underlying genai client, creating it if needed."""
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate_from_image(
        self,
        image_b64: str,
        prompt: str,
        model: str,
        temperature: float,
        thinking_budget: Optional[int] = None,
    ) -> Optional[str]:
        """Make a multimodal generate call with an inline image and a text prompt."""
        config = types.GenerateContentConfig(
            temperature=temperature,
            thinking_config=_thinking_config(thinking_budget),
        )
        try:
            image_part = types.Part.from_bytes(
                data=base64.b64decode(image_b64),
                mime_type=self.image_mime_type,
            )
            response = await self.client.aio.models.generate_content(
                model=model,
                contents=[image_part, prompt],
                config=config,
            )
        except Exception as err:
            logger.error("Gemini image request failed: %s", err)
            raise APIError(f"Gemini API error: {err}") from err
        return response.text

    async def chat(
        self,
        message: str,
        system_instruction: str,
        model: str,
        thinking_budget: Optional[int] = None,
    ) -> Optional[str]:
        """Create a chat session with a system instruction and send a single message."""
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            thinking_config=_thinking_config(thinking_budget),
        )
        try:
            session = self.client.aio.chats.create(model=model, config=config)
            response = await session.send_message(message)
        except Exception as err:
            logger.error("Gemini chat request failed: %s", err)
            raise APIError(f"Gemini API error: {err}") from err
        return response.text

    async def generate_audio(self, text: str, model: str, voice_name: str) -> Optional[Union[str, bytes]]:
        """Make a generate call asking for audio output with a prebuilt voice."""
        config = types.GenerateContentConfig(
            response_modalities=["AUDIO"],
            speech_config=types.SpeechConfig(
                voice_config=types.VoiceConfig(
                    prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice_name),
                ),
            ),
        )
        try:
            response = await self.client.aio.models.generate_content(
                model=model,
                contents=text,
                config=config,
            )
        except Exception as err:
            logger.error("Gemini speech request failed: %s", err)
            raise APIError(f"Gemini API error: {err}") from err
        return first_inline_data(response)


def _thinking_config(budget: Optional[int]) -> Optional[types.ThinkingConfig]:
    if budget is None:
        return None
    return types.ThinkingConfig(thinking_budget=budget)


def first_inline_data(response: Any) -> Optional[Union[str, bytes]]:
    """Return the inline data of the first part of the first candidate, if any.

    Args:
        response: A generate-content response (or anything shaped like one)

    Returns:
        The payload, or None when any level of the path is missing or empty
    """
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None)
    if not parts:
        return None
    inline_data = getattr(parts[0], "inline_data", None)
    return getattr(inline_data, "data", None) or None


def get_client(api_key: Optional[str] = None, settings: Optional[Settings] = None) -> GenAIBackend:
    """Factory function to create a configured backend.

    Args:
        api_key: API key overriding the configured one
        settings: Settings to read the key from. If None, read from the environment.

    Returns:
        Configured GeminiClient instance
    """
    settings = settings or get_settings()
    return GeminiClient(
        api_key=api_key if api_key is not None else settings.api_key,
        image_mime_type=settings.image_mime_type,
    )
