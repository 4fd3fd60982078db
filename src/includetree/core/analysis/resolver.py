from __future__ import annotations

"""
Include Path Resolution.

Follows the search order of C11 6.10.2 "Source file inclusion": quoted
names are looked up next to the including file first, then every name is
looked up in the search directories in the order they were supplied.
"""

import os
from typing import Sequence

from includetree.domain.include_models import Include, IncludeKind

UNRESOLVED = ""


def find_include_parent(
        include: Include,
        current_dir: str,
        include_paths: Sequence[str],
) -> str:
    """
    Determine the directory that actually contains the referenced file.

    Args:
        include: Reference to resolve.
        current_dir: Directory of the file holding the directive.
        include_paths: Ordered additional search directories.

    Returns:
        str: The winning directory, or UNRESOLVED ("") if no candidate holds
             a regular file with that name.
    """
    if include.kind is IncludeKind.QUOTED:
        if os.path.isfile(os.path.join(current_dir, include.path)):
            return current_dir

    for include_path in include_paths:
        if os.path.isfile(os.path.join(include_path, include.path)):
            return include_path

    return UNRESOLVED
