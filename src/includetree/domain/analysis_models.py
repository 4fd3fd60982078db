from __future__ import annotations

"""
Analysis Domain Data Models.

Defines the result object and factory functions used to communicate the
outcome of an include analysis between the engine and the CLI layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from includetree.domain.include_models import CounterEntry, DependencyTree

ERROR_INVALID_ROOT = "invalid_root"
ERROR_READ_FAILURE = "read_failure"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Unified result object of a complete analysis run.

    A failed run never carries partial trees or counters, since incomplete
    counts would be misleading.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Machine-readable failure category.
        base_path: Canonical project root that was analyzed.
        include_paths: Ordered search directories used for resolution.
        trees: One dependency tree per root file, in root order.
        counters: Edge count table sorted for display.
        report_path: Path of the persisted text report, if any.
        summary: Execution statistics.
    """
    ok: bool
    error: str
    error_kind: str

    base_path: str
    include_paths: List[str] = field(default_factory=list)

    trees: List[DependencyTree] = field(default_factory=list)
    counters: List[CounterEntry] = field(default_factory=list)
    report_path: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        error_kind: str,
        base_path: str,
        include_paths: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> AnalysisResult:
    """
    Create a failed analysis result instance.

    Args:
        error: Detailed error description.
        error_kind: Failure category (ERROR_INVALID_ROOT or ERROR_READ_FAILURE).
        base_path: The target project root.
        include_paths: Search directories of the failed run.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        AnalysisResult: An immutable error result object.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        base_path=base_path,
        include_paths=list(include_paths or []),
        summary=summary_extra or {},
    )


def create_success_result(
        base_path: str,
        include_paths: List[str],
        trees: List[DependencyTree],
        counters: List[CounterEntry],
        report_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None
) -> AnalysisResult:
    """
    Create a successful analysis result instance.

    Args:
        base_path: Canonical project root.
        include_paths: Search directories used for resolution.
        trees: Dependency trees in root order.
        counters: Sorted edge count table.
        report_path: Path to the saved text report.
        summary_extra: Final execution metrics.

    Returns:
        AnalysisResult: An immutable success result object.
    """
    return AnalysisResult(
        ok=True,
        error="",
        error_kind="",
        base_path=base_path,
        include_paths=list(include_paths),
        trees=trees,
        counters=counters,
        report_path=report_path,
        summary=summary_extra or {},
    )
