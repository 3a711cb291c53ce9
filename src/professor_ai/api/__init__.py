"""
API integration with the Gemini generative-AI service.

This module provides the backend interface the solver operations depend on,
the Gemini client implementing it and the prompts sent with each request.
"""

from .base import APIError, GenAIBackend
from .clients import GeminiClient, get_client
from .prompt import ResponseMode, select_chat_instruction, select_prompt

__all__ = [
    # Main classes
    "APIError",
    "GenAIBackend",
    "GeminiClient",
    "get_client",

    # Prompts
    "ResponseMode",
    "select_prompt",
    "select_chat_instruction",
]
