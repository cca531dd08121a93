#!/usr/bin/env python3
"""
Class hierarchy example for PredicateTree.

Treats Python's exception classes as a tree without touching the classes:
object is the root and a class's primary base is its parent.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from predicatetree import format_tree, get_tree_stats
from predicatetree.testing.fixtures import class_hierarchy_tree


def name(cls):
    return cls.__name__


def main():
    tree = class_hierarchy_tree()

    print("Full hierarchy:")
    print(format_tree(tree, label=name))

    print("\nAncestors of KeyError:")
    print(" -> ".join(name(cls) for cls in tree.find_parents(KeyError)))

    nearest = tree.find_same_parent([KeyError, ZeroDivisionError])
    print(f"\nNearest common ancestor of KeyError and ZeroDivisionError: {name(nearest)}")

    print("\nSubtree rooted at OSError:")
    print(format_tree(tree.subtree(OSError), label=name))

    print("\nLocal tree spanning ZeroDivisionError and KeyError:")
    print(format_tree(tree.local_tree([ZeroDivisionError, KeyError]), label=name))

    stats = get_tree_stats(tree)
    print(f"\n{stats['total_nodes']} classes, {stats['leaf_nodes']} leaves, "
          f"max depth {stats['max_depth']}")

    tree.remove_node(LookupError)
    print(f"\nAfter removing LookupError: {len(tree)} classes remain")


if __name__ == "__main__":
    main()
