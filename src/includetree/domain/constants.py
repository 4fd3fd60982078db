from __future__ import annotations

"""
Domain Constants.

Centralizes the recognized source extensions and the formatting constants
shared by the analysis engine and the reporting layer.
"""

from typing import Tuple

APP_VERSION = "0.1.0"

HEADER_EXTENSION = ".hpp"
IMPLEMENTATION_EXTENSION = ".cpp"

# Only these files are traversal roots and valid inclusion targets
SOURCE_EXTENSIONS: Tuple[str, ...] = (HEADER_EXTENSION, IMPLEMENTATION_EXTENSION)

# Indentation added per nesting level of the dependency tree
DEPTH_STEP = 2

CYCLE_MARKER = "(cycle)"
UNRESOLVED_MARKER = "(unresolved)"
