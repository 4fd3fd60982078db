from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and safe persistence helpers shared by the
configuration layer and the report writer.
"""

import logging
import os
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# PERSISTENCE API
# -----------------------------------------------------------------------------

def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)


def save_lines(save_path: str, lines: List[str]) -> bool:
    """
    Persist text lines to disk, creating the parent directory if needed.

    Failures are logged and reported through the return value.

    Args:
        save_path: Target file path.
        lines: Lines to write, joined with newlines.

    Returns:
        bool: True if the file was written.
    """
    ok, err = safe_mkdir(os.path.dirname(os.path.abspath(save_path)))
    if not ok:
        logger.error(f"Failed to create directory for '{save_path}': {err}")
        return False

    try:
        with open(save_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
    except OSError as e:
        logger.error(f"Failed to save report to '{save_path}': {e}")
        return False

    logger.info(f"Report saved to file: {save_path}")
    return True
