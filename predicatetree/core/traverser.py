"""Tree traversal strategies for PredicateTree.

Traversers implement different algorithms for walking through trees.
They only need an IterableTree (a root and a way to find children), so
they work with GenericTree and any other implementation alike.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, List, Optional, Set, Tuple, Union

from ..config import TraversalStrategy
from .tree import IterableTree


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, tree: IterableTree):
        """Initialize traverser with a tree.

        Args:
            tree: IterableTree to walk
        """
        self.tree = tree

    def traverse(self,
                 root: Optional[Any] = None,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Any, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node (None = the tree's root)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        if root is None:
            root = self.tree.get_root()
        if root is None:
            return
        yield from self._traverse(root, max_depth, min_depth)

    @abstractmethod
    def _traverse(self,
                  root: Any,
                  max_depth: Optional[int],
                  min_depth: int) -> Iterator[Tuple[Any, int]]:
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def _traverse(self, root, max_depth, min_depth):
        queue: Deque[Tuple[Any, int]] = deque([(root, 0)])
        visited: Set[Any] = set()

        while queue:
            node, depth = queue.popleft()

            # Skip if already visited (handles cycles)
            if node in visited:
                continue
            visited.add(node)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.tree.find_children(node):
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, siblings in tree order.
    """

    def _traverse(self, root, max_depth, min_depth):
        stack: List[Tuple[Any, int]] = [(root, 0)]
        visited: Set[Any] = set()

        while stack:
            node, depth = stack.pop()
            if node in visited:
                continue
            visited.add(node)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                children = self.tree.find_children(node)
                stack.extend((child, depth + 1) for child in reversed(children))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for deletion or calculating
    aggregate values over subtrees.
    """

    def _traverse(self, root, max_depth, min_depth):
        visited: Set[Any] = set()

        def _traverse_recursive(node: Any, depth: int) -> Iterator[Tuple[Any, int]]:
            if node in visited:
                return
            visited.add(node)

            # First traverse children
            if self._should_explore(depth, max_depth):
                for child in self.tree.find_children(node):
                    yield from _traverse_recursive(child, depth + 1)

            # Then yield parent (post-order)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        yield from _traverse_recursive(root, 0)


def create_traverser(strategy: Union[TraversalStrategy, str], tree: IterableTree) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or its name (bfs, dfs_pre, dfs_post)
        tree: IterableTree to walk

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'depth_first_post': DepthFirstPostOrderTraverser,
    }

    if isinstance(strategy, TraversalStrategy):
        strategy = strategy.value

    strategy_lower = str(strategy).lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](tree)
