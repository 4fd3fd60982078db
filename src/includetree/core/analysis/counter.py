from __future__ import annotations

"""
Edge Count Table helpers.

Seeds the table with the root files and orders it for display.
"""

from typing import Iterable, List

from includetree.domain.include_models import CounterEntry, IncludeCounter


def init_root_counters(counter: IncludeCounter, roots: Iterable[str], base_path: str) -> None:
    """Ensure every root file has an entry, even if nothing includes it."""
    for root in roots:
        counter.setdefault((root, base_path), 0)


def sort_counters(counter: IncludeCounter) -> List[CounterEntry]:
    """
    Order the table by count descending, then by (path, parent) ascending.

    Args:
        counter: Edge count table.

    Returns:
        List[CounterEntry]: Rows ready for rendering.
    """
    ordered = sorted(counter.items(), key=lambda item: (-item[1], item[0]))
    return [CounterEntry(path=path, parent_dir=parent, count=count) for (path, parent), count in ordered]
