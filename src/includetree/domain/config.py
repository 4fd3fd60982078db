from __future__ import annotations

"""
Configuration Domain Defaults.

Provides the default runtime configuration (session state) that drives an
analysis run. Configuration is assembled from defaults and CLI overrides
only; nothing is persisted between runs.
"""

import os
from typing import Any, Dict, List

# Keys accepted from external sources (CLI overrides)
CONFIG_KEYS: List[str] = [
    "input_path",
    "include_paths",
    "exclude_patterns",
    "print_trees",
    "report_path",
]


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": os.getcwd(),
        "include_paths": [],

        # Root discovery
        "exclude_patterns": [],

        # Reporting
        "print_trees": True,
        "report_path": "",
    }
