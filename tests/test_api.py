"""Tests for the high-level functional API."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from predicatetree import (
    GenericTree,
    ParentAbsentError,
    TreeConfig,
    build_tree,
    count_nodes,
    find_nodes,
    format_tree,
    get_depth,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    traverse_tree,
)
from predicatetree.testing.fixtures import class_hierarchy_tree


PARENTS = {"B": "A", "C": "A", "D": "B", "E": "B", "F": "C"}


@pytest.fixture
def tree():
    return build_tree(
        ["A", "B", "C", "D", "E", "F"],
        lambda node: node == "A",
        lambda parent, child: PARENTS.get(child) == parent,
    )


def test_build_tree(tree):
    assert isinstance(tree, GenericTree)
    assert tree.get_root() == "A"


def test_build_tree_validates():
    with pytest.raises(ParentAbsentError):
        build_tree(["A", "D"], lambda n: n == "A", lambda p, c: PARENTS.get(c) == p)


def test_build_tree_with_config():
    config = TreeConfig.strict()
    tree = build_tree(["A"], lambda n: n == "A", lambda p, c: False, config=config)
    assert tree.config is config


def test_traverse_tree(tree):
    assert list(traverse_tree(tree)) == ["A", "B", "D", "E", "C", "F"]
    assert list(traverse_tree(tree, strategy="bfs")) == ["A", "B", "C", "D", "E", "F"]
    assert list(traverse_tree(tree, root="C")) == ["C", "F"]
    assert list(traverse_tree(tree, max_depth=1)) == ["A", "B", "C"]


def test_count_nodes(tree):
    assert count_nodes(tree) == 6
    assert count_nodes(tree, root="B") == 3
    assert count_nodes(tree, min_depth=2) == 3


def test_find_nodes(tree):
    assert list(find_nodes(tree, lambda n: n in "DEF")) == ["D", "E", "F"]


def test_get_depth(tree):
    assert get_depth(tree, "A") == 0
    assert get_depth(tree, "C") == 1
    assert get_depth(tree, "D") == 2


def test_get_leaf_nodes(tree):
    assert get_leaf_nodes(tree) == ["D", "E", "F"]


def test_get_tree_paths(tree):
    assert get_tree_paths(tree) == [
        ["A"],
        ["A", "B"],
        ["A", "C"],
        ["A", "B", "D"],
        ["A", "B", "E"],
        ["A", "C", "F"],
    ]


def test_get_tree_stats(tree):
    stats = get_tree_stats(tree)
    assert stats['total_nodes'] == 6
    assert stats['leaf_nodes'] == 3
    assert stats['internal_nodes'] == 3
    assert stats['max_depth'] == 2
    assert stats['depths'] == {0: 1, 1: 2, 2: 3}
    assert stats['root'] == "A"


def test_get_tree_stats_empty():
    empty = GenericTree(lambda n: True, lambda p, c: False)
    stats = get_tree_stats(empty)
    assert stats['total_nodes'] == 0
    assert stats['root'] is None


def test_format_tree(tree):
    assert format_tree(tree) == "A\n-B\n--D\n--E\n-C\n--F"
    assert format_tree(tree, indent="  ", label=str.lower) == "a\n  b\n    d\n    e\n  c\n    f"


def test_format_class_hierarchy():
    local = class_hierarchy_tree().local_tree([ZeroDivisionError, KeyError])
    assert format_tree(local, label=lambda cls: cls.__name__) == "\n".join([
        "object",
        "-BaseException",
        "--Exception",
        "---ArithmeticError",
        "----ZeroDivisionError",
        "---LookupError",
        "----KeyError",
    ])
