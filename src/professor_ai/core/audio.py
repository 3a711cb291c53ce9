"""
Audio payload decoding and WAV output for synthesized speech.
"""

import base64
import wave
from pathlib import Path
from typing import Union

from ..utils.log_utils import get_logger

logger = get_logger(__name__)


def decode_audio(payload: Union[str, bytes]) -> bytes:
    """Turn an inline audio payload into raw bytes.

    Args:
        payload: Base64 text as sent on the wire, or bytes the SDK already decoded

    Returns:
        Raw audio bytes

    Raises:
        binascii.Error: If a string payload is not valid base64
    """
    if isinstance(payload, str):
        return base64.b64decode(payload)
    return bytes(payload)


def write_wav(pcm: bytes, path: Union[str, Path], sample_rate: int = 24000) -> Path:
    """Write 16-bit mono PCM samples to a WAV file.

    Args:
        pcm: Little-endian 16-bit PCM samples
        path: Output file path
        sample_rate: Sample rate in Hz (default 24000)

    Returns:
        Path of the written file
    """
    path = Path(path)
    with wave.open(str(path), "wb") as wav_file:
        wav_file.setnchannels(1)  # Mono
        wav_file.setsampwidth(2)  # 16-bit
        wav_file.setframerate(sample_rate)
        wav_file.writeframes(pcm)
    logger.debug("Wrote %d bytes of audio to '%s'", len(pcm), path)
    return path
