"""
Core operations and the media helpers they rely on.
"""

from .audio import decode_audio, write_wav
from .image_encoder import encode_image_file
from .solver import (
    CHAT_FALLBACK,
    SOLVE_FALLBACK,
    chat_with_professor,
    generate_speech,
    solve_from_image,
)

__all__ = [
    "solve_from_image",
    "chat_with_professor",
    "generate_speech",
    "SOLVE_FALLBACK",
    "CHAT_FALLBACK",
    "decode_audio",
    "write_wav",
    "encode_image_file",
]
