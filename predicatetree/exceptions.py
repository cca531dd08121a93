"""Exceptions raised by PredicateTree.

Every failure is a distinct subclass of TreeError and carries the node(s)
that caused it, so callers can recover without parsing messages.
"""

from typing import Any, List, Sequence


class TreeError(Exception):
    """Base class for all tree errors."""
    pass


class NodeAbsentError(TreeError):
    """Raised when an operation requires a node that is not in the tree."""

    def __init__(self, node: Any):
        super().__init__(f"Node not in tree: {node!r}")
        self.node = node


class NodeExistsError(TreeError):
    """Raised when adding a node that is already in the tree."""

    def __init__(self, node: Any):
        super().__init__(f"Node already in tree: {node!r}")
        self.node = node


class ParentAbsentError(TreeError):
    """Raised when no tree member satisfies the parent relation for a node."""

    def __init__(self, node: Any):
        super().__init__(f"Parent of node {node!r} is not in tree")
        self.node = node


class InvalidRootError(TreeError):
    """Raised when the first node added to an empty tree is not a root."""

    def __init__(self, node: Any):
        super().__init__(f"Node is not a root: {node!r}")
        self.node = node


class RootAbsentError(TreeError):
    """Raised when a node collection contains no root."""

    def __init__(self):
        super().__init__("Root node is absent")


class MultiRootError(TreeError):
    """Raised when a node collection contains more than one root."""

    def __init__(self, roots: Sequence[Any]):
        super().__init__(f"Multiple root nodes: {list(roots)!r}")
        self.roots = list(roots)


class CycleError(TreeError):
    """Raised when walking up from a node revisits a node.

    Only raised when TreeConfig.detect_cycles is enabled.
    """

    def __init__(self, node: Any, chain: Sequence[Any]):
        super().__init__(
            f"Relation predicate forms a cycle at {node!r}: {list(chain)!r}"
        )
        self.node = node
        self.chain = list(chain)


class MultiParentError(TreeError):
    """Raised when a node has more than one candidate parent.

    Only raised when TreeConfig.unique_parent is enabled.
    """

    def __init__(self, node: Any, parents: Sequence[Any]):
        super().__init__(f"Node {node!r} has multiple parents: {list(parents)!r}")
        self.node = node
        self.parents = list(parents)


class ConfigurationError(TreeError):
    """Raised when a TreeConfig fails validation."""

    def __init__(self, errors: List[str]):
        super().__init__(f"Invalid configuration: {'; '.join(errors)}")
        self.errors = errors
