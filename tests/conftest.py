from typing import Optional, Union

import pytest

from professor_ai.api.base import GenAIBackend
from professor_ai.config import Settings


class FakeBackend(GenAIBackend):
    """In-memory backend that records requests and replays canned responses."""

    def __init__(
        self,
        text: Optional[str] = "ok",
        audio: Optional[Union[str, bytes]] = None,
        error: Optional[Exception] = None,
    ):
        self.text = text
        self.audio = audio
        self.error = error
        self.calls = []

    async def generate_from_image(self, image_b64, prompt, model, temperature, thinking_budget=None):
        self.calls.append(("image", dict(image_b64=image_b64, prompt=prompt, model=model,
                                         temperature=temperature, thinking_budget=thinking_budget)))
        if self.error:
            raise self.error
        return self.text

    async def chat(self, message, system_instruction, model, thinking_budget=None):
        self.calls.append(("chat", dict(message=message, system_instruction=system_instruction,
                                        model=model, thinking_budget=thinking_budget)))
        if self.error:
            raise self.error
        return self.text

    async def generate_audio(self, text, model, voice_name):
        self.calls.append(("audio", dict(text=text, model=model, voice_name=voice_name)))
        if self.error:
            raise self.error
        return self.audio


@pytest.fixture
def settings():
    return Settings(api_key="test-key")


@pytest.fixture
def backend():
    return FakeBackend()
