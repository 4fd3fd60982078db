from __future__ import annotations

"""
Dependency Report Renderer.

Converts dependency trees and the sorted edge count table into plain text
lines. Nesting is conveyed by indentation; markers flag search-path
resolution, cycles and unresolved references.
"""

from typing import Iterable, List

from includetree.domain.constants import CYCLE_MARKER, UNRESOLVED_MARKER
from includetree.domain.include_models import (
    CounterEntry,
    DependencyTree,
    IncludeStatus,
    TreeRecord,
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_record(record: TreeRecord) -> str:
    """Format a single tree node as an indented line."""
    line = f"{' ' * record.depth}{record.path}"

    if record.via_search_path and record.parent_dir:
        line += f" [{record.parent_dir}]"

    if record.status is IncludeStatus.CYCLE:
        line += f" {CYCLE_MARKER}"
    elif record.status is IncludeStatus.UNRESOLVED:
        line += f" {UNRESOLVED_MARKER}"

    return line


def render_dependency_tree(tree: DependencyTree) -> List[str]:
    """
    Render every record of a root's traversal, in pre-order.

    Args:
        tree: Dependency tree produced by the walker.

    Returns:
        List[str]: One line per node.
    """
    return [render_record(record) for record in tree.records]


def render_counter_table(entries: Iterable[CounterEntry]) -> List[str]:
    """Render the sorted edge count table as 'path count' lines."""
    return [f"{entry.path} {entry.count}" for entry in entries]


def render_report(
        trees: Iterable[DependencyTree],
        entries: Iterable[CounterEntry],
        include_trees: bool = True,
) -> List[str]:
    """
    Assemble the full console report.

    Trees are separated by a blank line, and a blank line separates the
    tree section from the counter section.

    Args:
        trees: Dependency trees in root order.
        entries: Sorted edge count table.
        include_trees: Whether to emit the tree section at all.

    Returns:
        List[str]: Report lines.
    """
    lines: List[str] = []

    if include_trees:
        for i, tree in enumerate(trees):
            if i:
                lines.append("")
            lines.extend(render_dependency_tree(tree))
        lines.append("")

    lines.extend(render_counter_table(entries))
    return lines
