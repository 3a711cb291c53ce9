"""
Prompts for image solving and chat.
"""

from enum import Enum
from typing import Optional


class ResponseMode(Enum):
    """How much the model should say besides the answer."""

    SIMPLE = "simple"
    EXPLAINED = "explained"


DEFAULT_MODE = ResponseMode.EXPLAINED


SIMPLE_PROMPT = """
ATUE COMO UM RESOLVEDOR DIRETO (MODO SIMPLES).
Analise o problema na imagem e forneça APENAS o resultado final.
REGRAS:
1. PROIBIDO símbolos como '$', '*', '_' ou '#'.
2. SEM EXPLICAÇÃO. Apenas o valor ou resposta direta.
3. Use texto puro (ex: x^2).
""".strip()


EXPLAINED_PROMPT = """
ATUE COMO UM RESOLVEDOR DIRETO (MODO EXPLICAÇÃO).
Analise o problema na imagem e forneça o resultado seguido de uma explicação curta.
REGRAS:
1. PROIBIDO símbolos como '$', '*', '_' ou '#'.
2. RESPOSTA DIRETA: Comece com o resultado.
3. EXPLICAÇÃO CURTA: Máximo de 2 frases curtas sobre o processo.
4. Use texto puro.
""".strip()


SIMPLE_CHAT_INSTRUCTION = (
    "Você é um resolvedor ultradireto (Modo Simples). "
    "Forneça APENAS a resposta final. "
    "Sem símbolos como $ ou *."
)

EXPLAINED_CHAT_INSTRUCTION = (
    "Você é um resolvedor direto (Modo Explicação). "
    "Forneça a resposta e uma explicação de no máximo 2 frases. "
    "Sem símbolos como $ ou *."
)


IMAGE_PROMPTS = {
    ResponseMode.SIMPLE: SIMPLE_PROMPT,
    ResponseMode.EXPLAINED: EXPLAINED_PROMPT,
}

CHAT_INSTRUCTIONS = {
    ResponseMode.SIMPLE: SIMPLE_CHAT_INSTRUCTION,
    ResponseMode.EXPLAINED: EXPLAINED_CHAT_INSTRUCTION,
}


def select_prompt(mode: Optional[ResponseMode] = DEFAULT_MODE) -> str:
    """Return the image-solving prompt for `mode` (EXPLAINED when None)."""
    return IMAGE_PROMPTS[mode or DEFAULT_MODE]


def select_chat_instruction(mode: Optional[ResponseMode] = DEFAULT_MODE) -> str:
    """Return the chat system instruction for `mode` (EXPLAINED when None)."""
    return CHAT_INSTRUCTIONS[mode or DEFAULT_MODE]
