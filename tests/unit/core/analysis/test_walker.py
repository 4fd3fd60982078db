from __future__ import annotations

"""
Unit tests for the Dependency Graph Walker.

Verifies:
1. Cycle termination and marking (self, two-step, through sibling branches).
2. Diamond includes counted independently per branch.
3. Unresolved references recorded but never expanded.
4. Search-path resolution and per-file base directories.
5. Deep acyclic chains beyond the interpreter recursion limit.
6. Propagation of read failures.
"""

import os
import sys
from unittest.mock import patch

import pytest

from includetree.core.analysis import directive_parser
from includetree.core.analysis.walker import walk_dependency_tree
from includetree.domain.errors import SourceReadError
from includetree.domain.include_models import Include, IncludeKind, IncludeStatus


def _root(path: str) -> Include:
    return Include(path, IncludeKind.QUOTED)


def _shape(tree):
    """Reduce records to (path, depth, status) triples."""
    return [(r.path, r.depth, r.status) for r in tree.records]


R, U, C = IncludeStatus.RESOLVED, IncludeStatus.UNRESOLVED, IncludeStatus.CYCLE


# -----------------------------------------------------------------------------
# Cycles
# -----------------------------------------------------------------------------
def test_two_file_cycle_is_marked_and_terminates(make_project):
    """a -> b -> a stops at the second a, which is marked as a cycle."""
    root = make_project({
        "a.hpp": '#include "b.hpp"\n',
        "b.hpp": '#include "a.hpp"\n',
    })
    base = str(root)
    counter = {}

    tree = walk_dependency_tree(_root("a.hpp"), base, [], counter)

    assert _shape(tree) == [("a.hpp", 0, R), ("b.hpp", 2, R), ("a.hpp", 4, C)]
    assert tree.parent_dir == base
    assert counter == {("b.hpp", base): 1, ("a.hpp", base): 1}


def test_self_inclusion_is_one_step_cycle(make_project):
    """A header including itself terminates on the second visit."""
    root = make_project({"a.hpp": '#include "a.hpp"\n'})
    base = str(root)
    counter = {}

    tree = walk_dependency_tree(_root("a.hpp"), base, [], counter)

    assert _shape(tree) == [("a.hpp", 0, R), ("a.hpp", 2, C)]
    assert counter == {("a.hpp", base): 1}


def test_cycle_is_not_read_again(make_project):
    """The file closing a cycle is not opened a second time."""
    root = make_project({"a.hpp": '#include "a.hpp"\n'})

    with patch(
        "includetree.core.analysis.walker.read_includes",
        wraps=directive_parser.read_includes,
    ) as spy:
        walk_dependency_tree(_root("a.hpp"), str(root), [], {})

    assert spy.call_count == 1


def test_sibling_branches_detect_cycles_independently(make_project):
    """Each branch carries its own chain: b and c close cycles in both branches."""
    root = make_project({
        "a.hpp": '#include "b.hpp"\n#include "c.hpp"\n',
        "b.hpp": '#include "c.hpp"\n',
        "c.hpp": '#include "b.hpp"\n',
    })
    base = str(root)
    counter = {}

    tree = walk_dependency_tree(_root("a.hpp"), base, [], counter)

    assert _shape(tree) == [
        ("a.hpp", 0, R),
        ("b.hpp", 2, R),
        ("c.hpp", 4, R),
        ("b.hpp", 6, C),
        ("c.hpp", 2, R),
        ("b.hpp", 4, R),
        ("c.hpp", 6, C),
    ]
    assert counter[("b.hpp", base)] == 3
    assert counter[("c.hpp", base)] == 3


# -----------------------------------------------------------------------------
# Diamonds
# -----------------------------------------------------------------------------
def test_diamond_is_not_a_cycle(make_project):
    """Two branches reaching the same header both expand it and both count."""
    root = make_project({
        "top.hpp": '#include "left.hpp"\n#include "right.hpp"\n',
        "left.hpp": '#include "c.hpp"\n',
        "right.hpp": '#include "c.hpp"\n',
        "c.hpp": "",
    })
    base = str(root)
    counter = {}

    tree = walk_dependency_tree(_root("top.hpp"), base, [], counter)

    assert _shape(tree) == [
        ("top.hpp", 0, R),
        ("left.hpp", 2, R),
        ("c.hpp", 4, R),
        ("right.hpp", 2, R),
        ("c.hpp", 4, R),
    ]
    assert counter[("c.hpp", base)] == 2


def test_counter_is_shared_across_walks(make_project):
    """Successive walks accumulate into the same table."""
    root = make_project({
        "a.hpp": '#include "shared.hpp"\n',
        "c.hpp": '#include "shared.hpp"\n',
        "shared.hpp": "",
    })
    base = str(root)
    counter = {}

    walk_dependency_tree(_root("a.hpp"), base, [], counter)
    walk_dependency_tree(_root("c.hpp"), base, [], counter)

    assert counter == {("shared.hpp", base): 2}


# -----------------------------------------------------------------------------
# Unresolved References
# -----------------------------------------------------------------------------
def test_unresolved_reference_is_recorded_and_counted(make_project):
    """A missing bracket include is marked, counted, and never expanded."""
    root = make_project({"a.cpp": "#include <lib.hpp>\n"})
    base = str(root)
    counter = {}

    tree = walk_dependency_tree(_root("a.cpp"), base, [], counter)

    assert _shape(tree) == [("a.cpp", 0, R), ("lib.hpp", 2, U)]
    assert tree.records[1].parent_dir == ""
    assert counter == {("lib.hpp", ""): 1}


def test_unresolved_root_reports_empty_parent(tmp_path):
    """A root that does not resolve is a single unresolved record."""
    tree = walk_dependency_tree(_root("missing.hpp"), str(tmp_path), [], {})

    assert _shape(tree) == [("missing.hpp", 0, U)]
    assert tree.parent_dir == ""


# -----------------------------------------------------------------------------
# Resolution Context
# -----------------------------------------------------------------------------
def test_children_resolve_relative_to_their_own_file(make_project):
    """A file in sub/ finds its quoted siblings in sub/, not in the root."""
    root = make_project({
        "sub/a.hpp": '#include "b.hpp"\n',
        "sub/b.hpp": "",
        "b.hpp": "",
    })
    base = str(root)
    counter = {}

    tree = walk_dependency_tree(_root(os.path.join("sub", "a.hpp")), base, [], counter)

    assert tree.records[1].parent_dir == os.path.join(base, "sub")
    assert tree.records[1].via_search_path is False
    assert counter == {("b.hpp", os.path.join(base, "sub")): 1}


def test_same_directory_wins_over_search_path(make_project, tmp_path):
    """sub/a.hpp including "b.hpp" picks sub/ even if a search path has b.hpp."""
    root = make_project({
        "sub/a.hpp": '#include "b.hpp"\n',
        "sub/b.hpp": "",
    })
    search = tmp_path / "search"
    search.mkdir()
    (search / "b.hpp").write_text("", encoding="utf-8")

    tree = walk_dependency_tree(
        _root(os.path.join("sub", "a.hpp")), str(root), [str(search)], {}
    )

    assert tree.records[1].parent_dir == os.path.join(str(root), "sub")


def test_search_path_resolution_is_flagged(make_project, tmp_path):
    """Files found through a search path are flagged and expanded from there."""
    root = make_project({"a.cpp": "#include <ext.hpp>\n"})
    search = tmp_path / "third_party"
    search.mkdir()
    (search / "ext.hpp").write_text('#include "detail.hpp"\n', encoding="utf-8")
    (search / "detail.hpp").write_text("", encoding="utf-8")
    counter = {}

    tree = walk_dependency_tree(_root("a.cpp"), str(root), [str(search)], counter)

    ext, detail = tree.records[1], tree.records[2]
    assert (ext.path, ext.parent_dir, ext.via_search_path) == ("ext.hpp", str(search), True)
    assert (detail.path, detail.parent_dir, detail.via_search_path) == ("detail.hpp", str(search), False)
    assert counter == {("ext.hpp", str(search)): 1, ("detail.hpp", str(search)): 1}


def test_same_name_in_different_directories_are_distinct_keys(make_project):
    """Counter keys use the resolved directory, not just the text."""
    root = make_project({
        "a.hpp": '#include "x/util.hpp"\n#include "y/user.hpp"\n',
        "x/util.hpp": "",
        "y/user.hpp": '#include "util.hpp"\n',
        "y/util.hpp": "",
    })
    base = str(root)
    counter = {}

    walk_dependency_tree(_root("a.hpp"), base, [], counter)

    assert counter[("x/util.hpp", base)] == 1
    assert counter[("util.hpp", os.path.join(base, "y"))] == 1


# -----------------------------------------------------------------------------
# Robustness
# -----------------------------------------------------------------------------
def test_deep_chain_exceeds_recursion_limit(make_project):
    """Chains deeper than the recursion limit are walked without errors."""
    depth = sys.getrecursionlimit() + 200
    files = {f"h{i}.hpp": f'#include "h{i + 1}.hpp"\n' for i in range(depth)}
    files[f"h{depth}.hpp"] = ""
    root = make_project(files)

    tree = walk_dependency_tree(_root("h0.hpp"), str(root), [], {})

    assert len(tree.records) == depth + 1
    assert tree.records[-1].depth == depth * 2
    assert all(r.status is R for r in tree.records)


def test_read_failure_propagates(make_project):
    """An unreadable resolved file aborts the walk."""
    root = make_project({"a.hpp": '#include "b.hpp"\n', "b.hpp": ""})

    with patch(
        "includetree.core.analysis.walker.read_includes",
        side_effect=SourceReadError("b.hpp", PermissionError("denied")),
    ):
        with pytest.raises(SourceReadError):
            walk_dependency_tree(_root("a.hpp"), str(root), [], {})
