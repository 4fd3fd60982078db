from __future__ import annotations

"""
Source Noise Sanitization Service.

Removes block comments and raw string literal bodies from C++ source text
so that directive-like text embedded in them is never mistaken for a real
include directive. This is a minimal filter, not a lexer: ordinary string
literals, line comments and nested comments are not understood.
"""

import logging
import re
from typing import Final

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# NOISE PATTERNS
# -----------------------------------------------------------------------------

# R"delim( ... )delim", delimiter per C++ rules (max 16 chars, no parens,
# backslash or whitespace). Unterminated literals run to end of input.
_RAW_STRING_PATTERN: Final[str] = (
    r'R"(?P<delim>[^()\\\s]{0,16})\('
    r'(?:.*?\)(?P=delim)"|.*\Z)'
)

# /* ... */, first closing marker wins. Unterminated comments run to end of input.
_BLOCK_COMMENT_PATTERN: Final[str] = r"/\*(?:.*?\*/|.*\Z)"

# Single alternation so the span that opens first owns any marker inside it
_COMPILED_NOISE: Final[re.Pattern] = re.compile(
    f"{_RAW_STRING_PATTERN}|{_BLOCK_COMMENT_PATTERN}",
    re.DOTALL,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def strip_noise(text: str) -> str:
    """
    Remove every block comment and raw string literal from a source text.

    Removed spans vanish entirely (they are not blanked); all other
    characters, line breaks included, are preserved in order.

    Args:
        text: Raw file content.

    Returns:
        str: The sanitized content.
    """
    if not text:
        return ""
    return _COMPILED_NOISE.sub("", text)
