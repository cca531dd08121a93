"""Relation predicates for PredicateTree.

Predicates are what make PredicateTree work with ANY node type. Nodes are
plain values; the two predicates decide which node is the root and which
node is the parent of which. The engine never looks inside a node.

Both predicates must be pure: the engine calls them repeatedly and in no
guaranteed order.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class RootPredicate(ABC, Generic[T]):
    """Decides whether a node is the root of the tree.

    Exactly one node of any collection accepted as a complete tree must
    satisfy this predicate.
    """

    @abstractmethod
    def is_root(self, node: T) -> bool:
        """Check if the given node is the root.

        Args:
            node: The node to check

        Returns:
            True if node is the root, False otherwise
        """
        pass

    def __call__(self, node: T) -> bool:
        return self.is_root(node)


class RelationPredicate(ABC, Generic[T]):
    """Decides the parent/child relation between two nodes.

    For any non-root node of a valid tree, exactly one other member must
    satisfy is_parent_of(member, node).
    """

    @abstractmethod
    def is_parent_of(self, parent: T, child: T) -> bool:
        """Check if parent is the parent of child.

        Args:
            parent: Candidate parent node
            child: Candidate child node

        Returns:
            True if parent is the parent of child
        """
        pass

    def is_child_of(self, child: T, parent: T) -> bool:
        """Check if child is a child of parent.

        Default implementation swaps the arguments of is_parent_of.
        """
        return self.is_parent_of(parent, child)

    def __call__(self, parent: T, child: T) -> bool:
        return self.is_parent_of(parent, child)


class FunctionRootPredicate(RootPredicate[T]):
    """Root predicate backed by a plain callable."""

    def __init__(self, func: Callable[[T], bool]):
        self.func = func

    def is_root(self, node: T) -> bool:
        return bool(self.func(node))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.func!r})"


class FunctionRelationPredicate(RelationPredicate[T]):
    """Relation predicate backed by a plain callable taking (parent, child)."""

    def __init__(self, func: Callable[[T, T], bool]):
        self.func = func

    def is_parent_of(self, parent: T, child: T) -> bool:
        return bool(self.func(parent, child))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.func!r})"


class EqualsRootPredicate(RootPredicate[T]):
    """Root predicate satisfied only by nodes equal to a fixed node.

    Used to re-root an extracted subtree at its top node.
    """

    def __init__(self, root: T):
        self.root = root

    def is_root(self, node: T) -> bool:
        return node == self.root

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.root!r})"


def as_root_predicate(predicate: Any) -> RootPredicate:
    """Coerce a RootPredicate or a plain callable into a RootPredicate.

    Raises:
        TypeError: If predicate is neither
    """
    if isinstance(predicate, RootPredicate):
        return predicate
    if callable(predicate):
        return FunctionRootPredicate(predicate)
    raise TypeError(f"Root predicate must be callable, got {type(predicate).__name__}")


def as_relation_predicate(predicate: Any) -> RelationPredicate:
    """Coerce a RelationPredicate or a plain callable into a RelationPredicate.

    Raises:
        TypeError: If predicate is neither
    """
    if isinstance(predicate, RelationPredicate):
        return predicate
    if callable(predicate):
        return FunctionRelationPredicate(predicate)
    raise TypeError(f"Relation predicate must be callable, got {type(predicate).__name__}")
