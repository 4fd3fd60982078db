from __future__ import annotations

"""
Include Directive Extraction.

Scans sanitized C++ source text for #include directives and converts them
into immutable Include references, preserving their order of appearance.
"""

import logging
import re
from typing import List

from includetree.core.processing.sanitizer import strip_noise
from includetree.domain.constants import SOURCE_EXTENSIONS
from includetree.domain.errors import SourceReadError
from includetree.domain.include_models import Include, IncludeKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DIRECTIVE PATTERN
# -----------------------------------------------------------------------------

_EXTENSIONS_ALTERNATION = "|".join(re.escape(ext) for ext in SOURCE_EXTENSIONS)
_FILE_NAME = rf"[\w./\\]+(?:{_EXTENSIONS_ALTERNATION})"

# Horizontal whitespace only, a directive never spans lines
_INCLUDE_PATTERN = re.compile(
    r"^[^\S\r\n]*#[^\S\r\n]*include[^\S\r\n]*"
    rf'(?:"(?P<quoted>{_FILE_NAME})"|<(?P<angled>{_FILE_NAME})>)',
    re.MULTILINE,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def extract_includes(text: str) -> List[Include]:
    """
    Extract include directives from already sanitized source text.

    Directives naming files without a recognized extension, or otherwise
    malformed, are skipped silently.

    Args:
        text: Source text with comments and raw strings removed.

    Returns:
        List[Include]: References in file order.
    """
    includes: List[Include] = []
    for match in _INCLUDE_PATTERN.finditer(text):
        quoted = match.group("quoted")
        if quoted is not None:
            includes.append(Include(path=quoted, kind=IncludeKind.QUOTED))
        else:
            includes.append(Include(path=match.group("angled"), kind=IncludeKind.ANGLED))
    return includes


def read_includes(file_path: str) -> List[Include]:
    """
    Read a source file and extract its include directives.

    Args:
        file_path: Path of a resolved source file.

    Returns:
        List[Include]: References in file order.

    Raises:
        SourceReadError: If the file cannot be opened or read.
    """
    try:
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            content = f.read()
    except OSError as e:
        raise SourceReadError(file_path, e) from e

    includes = extract_includes(strip_noise(content))
    logger.debug(f"Found {len(includes)} include(s) in {file_path}")
    return includes
