"""
Base interface for generative-AI backends.

The solver operations only talk to this interface, so prompt selection and
output cleanup can be exercised without a live network call.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union


class APIError(RuntimeError):
    """Raised when a request to the remote AI service fails."""


class GenAIBackend(ABC):
    """Abstract base class for the three remote capabilities."""

    @abstractmethod
    async def generate_from_image(
        self,
        image_b64: str,
        prompt: str,
        model: str,
        temperature: float,
        thinking_budget: Optional[int] = None,
    ) -> Optional[str]:
        """Send one image plus a prompt and return the response text.

        Args:
            image_b64: Base64-encoded image data
            prompt: Instruction text sent after the image
            model: Model name to use
            temperature: Sampling temperature
            thinking_budget: Reasoning token budget, or None to leave it unset

        Returns:
            Response text, or None if the response carried no text

        Raises:
            APIError: If the request fails
        """

    @abstractmethod
    async def chat(
        self,
        message: str,
        system_instruction: str,
        model: str,
        thinking_budget: Optional[int] = None,
    ) -> Optional[str]:
        """Open a fresh chat session, send one message and return the reply text.

        Raises:
            APIError: If the request fails
        """

    @abstractmethod
    async def generate_audio(self, text: str, model: str, voice_name: str) -> Optional[Union[str, bytes]]:
        """Request spoken audio for `text`.

        Returns:
            The first inline audio payload of the response (base64 text or raw bytes),
            or None when the response holds no audio

        Raises:
            APIError: If the request fails
        """
