"""Unit tests for traversal strategies.

Tree under test:
    A
    ├── B
    │   ├── D
    │   └── E
    └── C
        └── F
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from predicatetree import TraversalStrategy
from predicatetree.core.traverser import (
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from predicatetree.testing.fixtures import parent_map_tree


PARENTS = {"B": "A", "C": "A", "D": "B", "E": "B", "F": "C"}


class TestTraversalStrategies(unittest.TestCase):
    """Test different traversal strategies."""

    def setUp(self):
        self.tree = parent_map_tree(PARENTS, "A", ["A", "B", "C", "D", "E", "F"])

    def test_breadth_first(self):
        result = list(BreadthFirstTraverser(self.tree).traverse())
        self.assertEqual(
            result,
            [("A", 0), ("B", 1), ("C", 1), ("D", 2), ("E", 2), ("F", 2)],
        )

    def test_depth_first_pre_order(self):
        result = list(DepthFirstPreOrderTraverser(self.tree).traverse())
        self.assertEqual(
            result,
            [("A", 0), ("B", 1), ("D", 2), ("E", 2), ("C", 1), ("F", 2)],
        )

    def test_pre_order_matches_find_younger(self):
        nodes = [node for node, _ in DepthFirstPreOrderTraverser(self.tree).traverse()]
        self.assertEqual(nodes, ["A"] + self.tree.find_younger("A"))

    def test_depth_first_post_order(self):
        result = [node for node, _ in DepthFirstPostOrderTraverser(self.tree).traverse()]
        self.assertEqual(result, ["D", "E", "B", "F", "C", "A"])

    def test_max_depth(self):
        result = [node for node, _ in BreadthFirstTraverser(self.tree).traverse(max_depth=1)]
        self.assertEqual(result, ["A", "B", "C"])

    def test_min_depth(self):
        result = [node for node, _ in BreadthFirstTraverser(self.tree).traverse(min_depth=2)]
        self.assertEqual(result, ["D", "E", "F"])

    def test_start_below_root(self):
        result = list(DepthFirstPreOrderTraverser(self.tree).traverse("B"))
        self.assertEqual(result, [("B", 0), ("D", 1), ("E", 1)])

    def test_empty_tree(self):
        empty = parent_map_tree(PARENTS, "A")
        for traverser_class in (BreadthFirstTraverser,
                                DepthFirstPreOrderTraverser,
                                DepthFirstPostOrderTraverser):
            self.assertEqual(list(traverser_class(empty).traverse()), [])


class TestCreateTraverser(unittest.TestCase):
    """Test the traverser factory."""

    def setUp(self):
        self.tree = parent_map_tree(PARENTS, "A", ["A"])

    def test_by_name(self):
        self.assertIsInstance(create_traverser("bfs", self.tree), BreadthFirstTraverser)
        self.assertIsInstance(create_traverser("DFS_PRE", self.tree), DepthFirstPreOrderTraverser)
        self.assertIsInstance(create_traverser("depth_first_post", self.tree),
                              DepthFirstPostOrderTraverser)

    def test_by_enum(self):
        traverser = create_traverser(TraversalStrategy.DEPTH_FIRST_POST, self.tree)
        self.assertIsInstance(traverser, DepthFirstPostOrderTraverser)
        self.assertIs(traverser.tree, self.tree)

    def test_unknown_strategy(self):
        with self.assertRaises(ValueError):
            create_traverser("sideways", self.tree)


if __name__ == "__main__":
    unittest.main()
