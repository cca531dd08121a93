"""Test fixtures for PredicateTree consumers.

These fixtures build small, well-known trees so test suites of projects
that consume PredicateTree don't have to hand-roll predicates.
"""

from typing import Any, Dict, Hashable, Iterable, Optional

from ..config import TreeConfig
from ..core.tree import GenericTree


# Part of Python's built-in exception hierarchy, in pre-order.
#
#   object
#   -BaseException
#   --Exception
#   ---ArithmeticError
#   ----ZeroDivisionError
#   ----OverflowError
#   ---LookupError
#   ----IndexError
#   ----KeyError
#   ---ValueError
#   ----UnicodeError
#   ---OSError
#   ----FileNotFoundError
#   ----PermissionError
#   --KeyboardInterrupt
#   --SystemExit
EXCEPTION_CLASSES = (
    object,
    BaseException,
    Exception,
    ArithmeticError,
    ZeroDivisionError,
    OverflowError,
    LookupError,
    IndexError,
    KeyError,
    ValueError,
    UnicodeError,
    OSError,
    FileNotFoundError,
    PermissionError,
    KeyboardInterrupt,
    SystemExit,
)


def is_root_class(cls: type) -> bool:
    """Root predicate for class hierarchies: only object is a root."""
    return cls is object


def is_base_class_of(parent: type, child: type) -> bool:
    """Relation predicate for single-inheritance class hierarchies."""
    return child.__base__ is parent


def class_hierarchy_tree(classes: Optional[Iterable[type]] = EXCEPTION_CLASSES,
                         config: Optional[TreeConfig] = None) -> GenericTree:
    """Build a tree of classes related by their primary base class.

    Args:
        classes: Classes to load (None = empty tree to grow with add_node)
        config: Optional strictness settings

    Returns:
        GenericTree rooted at object
    """
    return GenericTree(is_root_class, is_base_class_of, classes, config=config)


def parent_map_tree(parent_map: Dict[Hashable, Any],
                    root: Hashable,
                    nodes: Optional[Iterable[Hashable]] = None,
                    config: Optional[TreeConfig] = None) -> GenericTree:
    """Build a tree whose relation is read from a child -> parent mapping.

    Example:
        >>> tree = parent_map_tree({"B": "A", "C": "A"}, "A", ["A", "B", "C"])
        >>> tree.find_children("A")
        ['B', 'C']

    Args:
        parent_map: Maps each non-root node to its parent
        root: The root node
        nodes: Nodes to load (None = empty tree to grow with add_node)
        config: Optional strictness settings
    """
    def is_root(node):
        return node == root

    def is_parent_of(parent, child):
        return child in parent_map and parent_map[child] == parent

    return GenericTree(is_root, is_parent_of, nodes, config=config)
