"""High-level API for PredicateTree.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented API for ease of use
in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Union

from .config import TraversalStrategy, TreeConfig
from .core.traverser import create_traverser
from .core.tree import GenericTree, IterableTree, Tree


def build_tree(
    nodes: Iterable[Any],
    is_root: Callable[[Any], bool],
    is_parent_of: Callable[[Any, Any], bool],
    config: Optional[TreeConfig] = None,
) -> GenericTree:
    """Build and validate a tree from a complete node collection.

    Args:
        nodes: Every node of the tree
        is_root: Returns True for the root node
        is_parent_of: Returns True when the first argument is the parent
            of the second
        config: Optional strictness settings

    Returns:
        Validated GenericTree

    Example:
        >>> tree = build_tree(classes, lambda c: c is object,
        ...                   lambda p, c: c.__base__ is p)
    """
    return GenericTree(is_root, is_parent_of, nodes, config=config)


def traverse_tree(
    tree: IterableTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    root: Optional[Any] = None,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to walk
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post)
        root: Starting node (None = the tree's root)
        max_depth: Maximum depth to traverse, relative to root
        min_depth: Minimum depth before yielding nodes

    Yields:
        Nodes in traversal order
    """
    traverser = create_traverser(strategy, tree)
    for node, _ in traverser.traverse(root, max_depth=max_depth, min_depth=min_depth):
        yield node


def count_nodes(tree: IterableTree, **kwargs) -> int:
    """Count nodes reachable from the root (see traverse_tree for options)."""
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def find_nodes(
    tree: IterableTree,
    predicate: Callable[[Any], bool],
    **kwargs
) -> Iterator[Any]:
    """Find nodes that match a predicate.

    Example:
        >>> for cls in find_nodes(tree, lambda c: c.__name__.endswith("Error")):
        ...     print(cls.__name__)
    """
    for node in traverse_tree(tree, **kwargs):
        if predicate(node):
            yield node


def get_depth(tree: Tree, node: Any) -> int:
    """Get the depth of a node, where the root has depth 0."""
    return len(tree.find_parents(node))


def get_leaf_nodes(tree: Tree) -> List[Any]:
    """Get all nodes without children, in tree order."""
    return [node for node in tree.get_nodes() if not tree.find_children(node)]


def get_tree_paths(tree: Tree) -> List[List[Any]]:
    """Get the root-first path to every node, in tree order."""
    return [tree.find_parents(node) + [node] for node in tree.get_nodes()]


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes,
        max_depth, depths (node count per depth) and root
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {},
        'root': tree.get_root(),
    }

    traverser = create_traverser(TraversalStrategy.DEPTH_FIRST_PRE, tree)
    for node, depth in traverser.traverse():
        stats['total_nodes'] += 1

        if not tree.find_children(node):
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


def format_tree(
    tree: IterableTree,
    indent: str = "-",
    label: Callable[[Any], str] = str,
) -> str:
    """Render a tree as text, one node per line, prefixed by depth.

    Example:
        >>> print(format_tree(tree, label=lambda c: c.__name__))
        object
        -BaseException
        --Exception
        ---ArithmeticError
    """
    traverser = create_traverser(TraversalStrategy.DEPTH_FIRST_PRE, tree)
    return "\n".join(
        f"{indent * depth}{label(node)}" for node, depth in traverser.traverse()
    )
