"""
Text sanitization for model output.

The remote model is told not to use markup, but it still slips LaTeX delimiters
and markdown emphasis into its answers now and then. Everything handed back to
callers goes through `clean_output` first.
"""

import re
from typing import Any

# Single markup characters: LaTeX inline math, markdown emphasis and headings
_MARKUP_CHARS = re.compile(r"[$*_#]")
# Escaped LaTeX display/inline delimiters: \[ \] \( \)
_LATEX_DELIMITERS = re.compile(r"\\[\[\]()]")


def clean_output(text: Any) -> str:
    """Strip markup characters and LaTeX delimiters from model output.

    Args:
        text: Raw response text. Falsy values (None, "") yield an empty string.

    Returns:
        The cleaned text with surrounding whitespace removed.
    """
    if not text:
        return ""
    cleaned = _MARKUP_CHARS.sub("", str(text))
    removed = 1
    # A removal can join a leftover backslash to the next bracket ("\\((" -> "\(")
    while removed:
        cleaned, removed = _LATEX_DELIMITERS.subn("", cleaned)
    # Removing markers can expose new whitespace at the edges, so trim last
    return cleaned.strip()
