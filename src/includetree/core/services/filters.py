from __future__ import annotations

"""
Root Discovery Filters.

Regex-based exclusion of directories and files during root enumeration,
and classification of files by recognized source extension.
"""

import os
import re
from typing import List, Sequence

from includetree.domain.constants import SOURCE_EXTENSIONS

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: Sequence[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are discarded instead of aborting the run.

    Args:
        patterns: Raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            continue
    return compiled


def matches_any(name: str, compiled_patterns: Sequence[re.Pattern]) -> bool:
    """Verify if a name matches at least one compiled pattern."""
    return any(rx.search(name) for rx in compiled_patterns)


def is_source_file(file_name: str, extensions: Sequence[str] = SOURCE_EXTENSIONS) -> bool:
    """Check whether a file name carries one of the recognized extensions."""
    _, ext = os.path.splitext(file_name)
    return ext in extensions
