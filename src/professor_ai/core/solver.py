"""
Solver operations: image solving, professor chat and speech synthesis.

Each call is independent and stateless. A backend and settings can be passed
in explicitly; otherwise a Gemini client is built from the environment.
"""

from typing import Optional, Tuple

from ..api.base import GenAIBackend
from ..api.clients import get_client
from ..api.prompt import DEFAULT_MODE, ResponseMode, select_chat_instruction, select_prompt
from ..config import Settings, get_settings
from ..utils.log_utils import get_logger
from ..utils.text_utils import clean_output
from .audio import decode_audio

logger = get_logger(__name__)

SOLVE_FALLBACK = "Não foi possível processar."
CHAT_FALLBACK = "Erro no processamento."


def _resolve(backend: Optional[GenAIBackend], settings: Optional[Settings]) -> Tuple[GenAIBackend, Settings]:
    settings = settings or get_settings()
    return backend or get_client(settings=settings), settings


async def solve_from_image(
    image_b64: str,
    thinking: bool = True,
    mode: ResponseMode = DEFAULT_MODE,
    *,
    backend: Optional[GenAIBackend] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Solve the problem shown in an image.

    Args:
        image_b64: Base64-encoded JPEG image data
        thinking: Use the slower reasoning model with a thinking budget
        mode: SIMPLE for the bare result, EXPLAINED for result plus a short explanation
        backend: Backend to use (default: Gemini client from settings)
        settings: Models and budgets (default: read from the environment)

    Returns:
        Cleaned answer text, or the fallback message if the model returned no text

    Raises:
        APIError: If the request fails. Not retried.
    """
    backend, settings = _resolve(backend, settings)
    model = settings.pro_model if thinking else settings.flash_model
    budget = settings.solve_thinking_budget if thinking else None

    logger.debug("Solving image with %s (mode=%s, thinking_budget=%s)", model, mode, budget)
    text = await backend.generate_from_image(
        image_b64,
        select_prompt(mode),
        model=model,
        temperature=settings.temperature,
        thinking_budget=budget,
    )
    return clean_output(text or SOLVE_FALLBACK)


async def chat_with_professor(
    message: str,
    mode: ResponseMode = DEFAULT_MODE,
    *,
    backend: Optional[GenAIBackend] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Send one chat message in a fresh session; no history is kept between calls.

    Raises:
        APIError: If the request fails
    """
    backend, settings = _resolve(backend, settings)
    logger.debug("Chat with %s (mode=%s)", settings.pro_model, mode)
    text = await backend.chat(
        message,
        select_chat_instruction(mode),
        model=settings.pro_model,
        thinking_budget=settings.chat_thinking_budget,
    )
    return clean_output(text or CHAT_FALLBACK)


async def generate_speech(
    text: str,
    *,
    backend: Optional[GenAIBackend] = None,
    settings: Optional[Settings] = None,
) -> Optional[bytes]:
    """Synthesize speech for `text`.

    Unlike the text operations this one never raises: failures are logged and
    reported as None, the same as a response without audio.

    Returns:
        Raw audio bytes (16-bit mono PCM), or None
    """
    try:
        backend, settings = _resolve(backend, settings)
        payload = await backend.generate_audio(text, model=settings.tts_model, voice_name=settings.voice_name)
        if not payload:
            logger.warning("Speech response contained no audio")
            return None
        return decode_audio(payload)
    except Exception as err:
        logger.error("Failed to generate audio: %s", err)
        return None
