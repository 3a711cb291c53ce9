"""
Professor AI

Solves problems from photos, answers short questions and reads answers aloud
using Google's Gemini models.
"""

__version__ = "0.1.0"

from .api import APIError, GenAIBackend, GeminiClient, ResponseMode, get_client
from .config import Settings, get_settings
from .core import chat_with_professor, generate_speech, solve_from_image
from .utils import clean_output


def main():
    """Entry point for the professor-ai command."""
    from .cli import main as cli_main
    cli_main()


__all__ = [
    "solve_from_image",
    "chat_with_professor",
    "generate_speech",
    "clean_output",
    "ResponseMode",
    "APIError",
    "GenAIBackend",
    "GeminiClient",
    "get_client",
    "Settings",
    "get_settings",
]
