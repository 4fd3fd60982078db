from __future__ import annotations

"""
Root File Discovery Service.

Validates the project root and enumerates the source files that act as
independent traversal roots, in a stable order so reports are reproducible.
"""

import logging
import os
import re
from typing import List, Optional, Sequence

from includetree.core.services.filters import is_source_file, matches_any
from includetree.domain.constants import SOURCE_EXTENSIONS
from includetree.domain.errors import InvalidProjectPathError

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def validate_project_root(input_path: str) -> str:
    """
    Canonicalize the project root and verify it is an existing directory.

    Args:
        input_path: Raw project root path.

    Returns:
        str: Canonical absolute path of the root.

    Raises:
        InvalidProjectPathError: If the path is missing or not a directory.
    """
    if not input_path:
        raise InvalidProjectPathError(input_path, "no path given")
    if not os.path.exists(input_path):
        raise InvalidProjectPathError(input_path, "path does not exist")
    if not os.path.isdir(input_path):
        raise InvalidProjectPathError(input_path, "path is not a directory")
    return os.path.realpath(input_path)


def enumerate_source_files(
        project_root: str,
        extensions: Sequence[str] = SOURCE_EXTENSIONS,
        exclude_rx: Optional[List[re.Pattern]] = None,
) -> List[str]:
    """
    Collect every regular source file below the project root.

    Directories matching an exclusion pattern are pruned during the walk.

    Args:
        project_root: Canonical project root.
        extensions: Recognized file extensions.
        exclude_rx: Compiled exclusion patterns for directory and file names.

    Returns:
        List[str]: De-duplicated relative paths, in lexical order.
    """
    exclude_rx = exclude_rx or []
    found = set()

    for root, dirs, files in os.walk(project_root):
        # In-place directory pruning to optimize traversal
        dirs[:] = [d for d in dirs if not matches_any(d, exclude_rx)]
        dirs.sort()

        for file_name in files:
            if matches_any(file_name, exclude_rx):
                continue
            if not is_source_file(file_name, extensions):
                continue

            file_path = os.path.join(root, file_name)
            if not os.path.isfile(file_path):
                continue

            found.add(os.path.relpath(file_path, project_root))

    roots = sorted(found)
    logger.debug(f"Discovered {len(roots)} root file(s) under {project_root}")
    return roots
