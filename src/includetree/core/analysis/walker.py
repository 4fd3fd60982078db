from __future__ import annotations

"""
Dependency Graph Walker.

Expands one root file into its full include tree. Every branch carries its
own immutable include chain, so cycles are detected per branch while
diamonds (the same header reached through different branches) are not
mistaken for cycles. Traversal uses an explicit work stack, so arbitrarily
deep acyclic include chains do not hit the interpreter recursion limit.
"""

import logging
import os
from typing import List, Sequence, Tuple

from includetree.core.analysis.directive_parser import read_includes
from includetree.core.analysis.resolver import UNRESOLVED, find_include_parent
from includetree.domain.constants import DEPTH_STEP
from includetree.domain.include_models import (
    DependencyTree,
    Include,
    IncludeChain,
    IncludeCounter,
    IncludeKind,
    IncludeStatus,
    TreeRecord,
)

logger = logging.getLogger(__name__)

# (reference, directory to resolve from, chain of the branch, depth, reached as child)
_Frame = Tuple[Include, str, IncludeChain, int, bool]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def walk_dependency_tree(
        root: Include,
        base_dir: str,
        include_paths: Sequence[str],
        counter: IncludeCounter,
) -> DependencyTree:
    """
    Walk the include graph below one root reference depth-first.

    Records are produced in source order (pre-order). Each reference
    reached as a child increments its (path, resolved parent) entry in the
    shared counter exactly once, even when the visit stops right away
    because the reference is unresolved or closes a cycle. The root itself
    is not counted by its own walk.

    Args:
        root: Reference of the root file.
        base_dir: Directory the root reference is resolved from.
        include_paths: Ordered additional search directories.
        counter: Edge count table shared across all roots (mutated in place).

    Returns:
        DependencyTree: The records of the walk and the root's resolved parent.

    Raises:
        SourceReadError: If a resolved file cannot be read.
    """
    tree = DependencyTree(root=root.path)
    stack: List[_Frame] = [(root, base_dir, frozenset(), 0, False)]

    while stack:
        include, current_dir, chain, depth, is_child = stack.pop()

        parent_dir = find_include_parent(include, current_dir, include_paths)
        key = (include.path, parent_dir)

        if is_child:
            counter[key] = counter.get(key, 0) + 1
        else:
            tree.parent_dir = parent_dir

        if key in chain:
            logger.debug(f"Include cycle closed by '{include.path}' in '{parent_dir}'")
            tree.records.append(TreeRecord(include.path, parent_dir, depth, IncludeStatus.CYCLE))
            continue

        if parent_dir == UNRESOLVED:
            logger.debug(f"Unresolved include '{include.path}' from '{current_dir}'")
            tree.records.append(TreeRecord(include.path, parent_dir, depth, IncludeStatus.UNRESOLVED))
            continue

        via_search_path = not (include.kind is IncludeKind.QUOTED and parent_dir == current_dir)
        tree.records.append(
            TreeRecord(include.path, parent_dir, depth, IncludeStatus.RESOLVED, via_search_path)
        )

        # Children resolve relative to the directory of the file holding them
        file_path = os.path.join(parent_dir, include.path)
        child_dir = os.path.dirname(file_path)
        child_chain = chain | {key}

        # Reversed push keeps source order when popping
        for child in reversed(read_includes(file_path)):
            stack.append((child, child_dir, child_chain, depth + DEPTH_STEP, True))

    return tree
