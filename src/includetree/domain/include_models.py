from __future__ import annotations

"""
Include Graph Data Models.

Defines the immutable inclusion references extracted from source files,
the records emitted while walking the dependency graph, and the type
aliases for the per-branch chain and the global edge counter.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Tuple

# -----------------------------------------------------------------------------
# INCLUSION REFERENCES
# -----------------------------------------------------------------------------

class IncludeKind(Enum):
    """Delimiter form of an include directive, which drives the search order."""
    QUOTED = "quoted"
    ANGLED = "angled"


@dataclass(frozen=True)
class Include:
    """
    A single inclusion reference as written in the source.

    Attributes:
        path: Referenced path text, relative to the directory it resolves in.
        kind: Whether the name was written as "name" or <name>.
    """
    path: str
    kind: IncludeKind


# (referenced path, resolved parent directory or "")
EdgeKey = Tuple[str, str]
IncludeChain = FrozenSet[EdgeKey]
IncludeCounter = Dict[EdgeKey, int]

# -----------------------------------------------------------------------------
# TRAVERSAL RECORDS
# -----------------------------------------------------------------------------

class IncludeStatus(Enum):
    """Outcome of visiting one inclusion reference."""
    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"
    CYCLE = "cycle"


@dataclass(frozen=True)
class TreeRecord:
    """
    One node of a rendered dependency tree.

    Attributes:
        path: Referenced path text.
        parent_dir: Directory the reference resolved to ("" if unresolved).
        depth: Indentation depth of the node.
        status: Resolution outcome of the node.
        via_search_path: True when resolved in a search directory instead of
                         the directory of the including file.
    """
    path: str
    parent_dir: str
    depth: int
    status: IncludeStatus
    via_search_path: bool = False


@dataclass
class DependencyTree:
    """Pre-order records of one root file's traversal."""
    root: str
    parent_dir: str = ""
    records: List[TreeRecord] = field(default_factory=list)


@dataclass(frozen=True)
class CounterEntry:
    """A single row of the sorted edge count table."""
    path: str
    parent_dir: str
    count: int
