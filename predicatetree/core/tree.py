"""Tree abstractions and the predicate-driven GenericTree.

A GenericTree stores nothing but an ordered list of nodes. Every
relationship (parent, children, ancestors, descendants) is recomputed from
the relation predicate on each call; there is no cached index.

Notes:
- Sibling order is insertion order; no operation reorders nodes.
- A tree has a single owner. There is no locking and concurrent mutation
  is not supported.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from ..config import LoadMode, TreeConfig
from ..exceptions import (
    ConfigurationError,
    CycleError,
    InvalidRootError,
    MultiParentError,
    MultiRootError,
    NodeAbsentError,
    NodeExistsError,
    ParentAbsentError,
    RootAbsentError,
)
from .predicates import (
    EqualsRootPredicate,
    RelationPredicate,
    RootPredicate,
    as_relation_predicate,
    as_root_predicate,
)

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class IterableTree(ABC, Generic[T]):
    """The minimal surface needed to walk a tree from its root downward."""

    @abstractmethod
    def get_root(self) -> Optional[T]:
        """Get the root node, which has no parent.

        Returns:
            The root node, or None if the tree has no nodes
        """
        pass

    @abstractmethod
    def find_children(self, node: T) -> List[T]:
        """Find the children of a node.

        Args:
            node: The parent node

        Returns:
            Children in sibling order (empty for leaves and non-members)
        """
        pass


class Tree(IterableTree[T]):
    """A tree of arbitrary nodes.

    Requirements on every implementation:
    - Exactly one root once the tree is non-empty
    - No duplicate nodes
    - The root has no parent; every other node has exactly one parent
    - A node may have any number of children

    Python's exception hierarchy is a typical tree:

        object
        -BaseException
        --Exception
        ---ArithmeticError
        ----ZeroDivisionError
        ---LookupError
        ----IndexError
        ----KeyError
        --KeyboardInterrupt

    Trees are built empty and grown root-first, or loaded from a complete
    collection in one step.
    """

    @abstractmethod
    def get_nodes(self) -> Sequence[T]:
        """Get all nodes in insertion order, as a read-only sequence."""
        pass

    @abstractmethod
    def contains(self, node: T) -> bool:
        """Check membership by equality."""
        pass

    @abstractmethod
    def find_parent(self, node: T) -> Optional[T]:
        """Find the parent of a node.

        In the example above, the parent of IndexError is LookupError.

        Returns:
            The parent, or None for the root and for nodes whose parent
            is not in the tree
        """
        pass

    def find_parents(self, node: T) -> List[T]:
        """Find all ancestors of a node, root first.

        In the example above, the ancestors of KeyError are
        [object, BaseException, Exception, LookupError].

        Default implementation walks find_parent until it returns None.
        The node does not need to be a member of the tree.

        Returns:
            Ancestors ordered root -> nearest parent, empty for the root
        """
        parents = []
        parent = self.find_parent(node)
        while parent is not None:
            parents.append(parent)
            parent = self.find_parent(parent)
        parents.reverse()
        return parents

    @abstractmethod
    def find_younger(self, node: T) -> List[T]:
        """Find all descendants of a node in pre-order.

        The node does not need to be a member of the tree.
        """
        pass

    @abstractmethod
    def add_node(self, node: T) -> None:
        """Add a node below its parent.

        Nodes must be added root first, ancestors before descendants.

        Raises:
            InvalidRootError: If the tree is empty and node is not a root
            NodeExistsError: If node is already in the tree
            MultiRootError: If the tree already has a root and node is one too
            ParentAbsentError: If the parent of node is not in the tree
        """
        pass

    @abstractmethod
    def remove_node(self, node: T) -> None:
        """Remove a node together with all its descendants.

        Raises:
            NodeAbsentError: If node is not in the tree
        """
        pass

    @abstractmethod
    def subtree(self, node: T) -> 'Tree[T]':
        """Build a new tree rooted at node, holding node and its descendants.

        Raises:
            NodeAbsentError: If node is not in the tree
        """
        pass

    @abstractmethod
    def local_tree(self, nodes: Iterable[T]) -> 'Tree[T]':
        """Build the smallest tree holding nodes and all their ancestors.

        In the example above, the local tree of [ZeroDivisionError, KeyError]
        is:

            object
            -BaseException
            --Exception
            ---ArithmeticError
            ----ZeroDivisionError
            ---LookupError
            ----KeyError

        Raises:
            NodeAbsentError: If any of nodes is not in the tree
        """
        pass


def _common_prefix(chains: List[List[T]]) -> List[T]:
    """Longest prefix shared position-by-position by every chain."""
    if not chains:
        return []

    shortest = min(len(chain) for chain in chains)
    first = chains[0]
    same = []
    for i in range(shortest):
        element = first[i]
        if all(chain[i] == element for chain in chains[1:]):
            same.append(element)
        else:
            break
    return same


class GenericTree(Tree[T]):
    """Tree over any hashable node type, driven by two predicates.

    The root predicate picks out the root; the relation predicate decides
    which node is the parent of which. Both may be predicate objects or
    plain callables.

    Example:
        >>> parents = {"B": "A", "C": "A", "D": "B"}
        >>> tree = GenericTree(lambda n: n == "A",
        ...                    lambda p, c: parents.get(c) == p,
        ...                    ["A", "B", "C", "D"])
        >>> tree.find_parents("D")
        ['A', 'B']
    """

    def __init__(self,
                 root_predicate: Any,
                 relation_predicate: Any,
                 nodes: Optional[Iterable[T]] = None,
                 config: Optional[TreeConfig] = None):
        """Create an empty tree, or a tree loaded from nodes.

        Args:
            root_predicate: RootPredicate or callable(node) -> bool
            relation_predicate: RelationPredicate or callable(parent, child) -> bool
            nodes: Complete node collection to load and validate
            config: Strictness settings (defaults to TreeConfig())

        Raises:
            ConfigurationError: If config is invalid
            TreeError: If nodes do not form a valid tree (see load)
        """
        self.root_predicate: RootPredicate[T] = as_root_predicate(root_predicate)
        self.relation_predicate: RelationPredicate[T] = as_relation_predicate(relation_predicate)
        self.config = config or TreeConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(config_errors)

        self._nodes: List[T] = []
        if nodes is not None:
            self.load(nodes)

    def _check_node_exists(self, node: T) -> None:
        if not self.contains(node):
            raise NodeAbsentError(node)

    # Queries

    def get_root(self) -> Optional[T]:
        for node in self._nodes:
            if self.root_predicate.is_root(node):
                return node
        return None

    def contains(self, node: T) -> bool:
        return node in self._nodes

    def find_parent(self, node: T) -> Optional[T]:
        return self._find_parent_in(self._nodes, node)

    def _find_parent_in(self, nodes: List[T], node: T) -> Optional[T]:
        for candidate in nodes:
            if self.relation_predicate.is_parent_of(candidate, node):
                return candidate
        return None

    def _candidate_parents(self, nodes: List[T], node: T) -> List[T]:
        """All members other than node that claim to be its parent."""
        return [
            candidate for candidate in nodes
            if candidate != node and self.relation_predicate.is_parent_of(candidate, node)
        ]

    def _walk_up(self, nodes: List[T], node: T) -> List[T]:
        """Collect the ancestors of node within nodes, nearest first."""
        parents = []
        seen = {node} if self.config.detect_cycles else None
        parent = self._find_parent_in(nodes, node)
        while parent is not None:
            if seen is not None:
                if parent in seen:
                    raise CycleError(parent, [node] + parents + [parent])
                seen.add(parent)
            parents.append(parent)
            parent = self._find_parent_in(nodes, parent)
        return parents

    def find_parents(self, node: T) -> List[T]:
        parents = self._walk_up(self._nodes, node)
        parents.reverse()
        return parents

    def find_same_parents(self, nodes: Iterable[T]) -> List[T]:
        """Find the ancestors shared by all nodes, root first.

        Returns:
            Longest common root-aligned prefix of the nodes' ancestor
            chains; empty if nodes is empty or the chains diverge at once
        """
        return _common_prefix([self.find_parents(node) for node in nodes])

    def find_same_parent(self, nodes: Iterable[T]) -> Optional[T]:
        """Find the nearest common ancestor of nodes, or None."""
        parents = self.find_same_parents(nodes)
        return parents[-1] if parents else None

    def find_children(self, node: T) -> List[T]:
        return [
            candidate for candidate in self._nodes
            if self.relation_predicate.is_child_of(candidate, node)
        ]

    def find_younger(self, node: T) -> List[T]:
        # Iterative pre-order walk
        younger = []
        seen = {node} if self.config.detect_cycles else None
        stack = list(reversed(self.find_children(node)))
        while stack:
            current = stack.pop()
            if seen is not None:
                if current in seen:
                    continue
                seen.add(current)
            younger.append(current)
            stack.extend(reversed(self.find_children(current)))
        return younger

    def get_nodes(self) -> Tuple[T, ...]:
        return tuple(self._nodes)

    # Mutations

    def add_node(self, node: T) -> None:
        if node is None:
            raise ValueError("node must not be None")

        if not self._nodes:
            if not self.root_predicate.is_root(node):
                raise InvalidRootError(node)
            self._nodes.append(node)
            _logger.debug("Added root %r", node)
            return

        if node in self._nodes:
            raise NodeExistsError(node)

        if self.root_predicate.is_root(node):
            raise MultiRootError([self.get_root(), node])

        if self.config.unique_parent:
            parents = self._candidate_parents(self._nodes, node)
            if len(parents) > 1:
                raise MultiParentError(node, parents)
            parent = parents[0] if parents else None
        else:
            parent = self.find_parent(node)

        if parent is None:
            raise ParentAbsentError(node)

        self._nodes.append(node)
        _logger.debug("Added %r under %r", node, parent)

    def remove_node(self, node: T) -> None:
        self._check_node_exists(node)

        removed = set(self.find_younger(node))
        removed.add(node)
        self._nodes = [member for member in self._nodes if member not in removed]
        _logger.debug("Removed %r and %d descendant(s)", node, len(removed) - 1)

    def load(self, nodes: Iterable[T]) -> None:
        """Replace all stored nodes with a complete collection.

        With LoadMode.STAGED (the default) the collection is validated
        first and the tree is left untouched on failure. With
        LoadMode.IN_PLACE the stored nodes are replaced before validation,
        so a rejected collection stays stored.

        Args:
            nodes: Every node of the new tree, ancestors in any order

        Raises:
            MultiRootError: If more than one node is a root
            RootAbsentError: If no node is a root
            NodeExistsError: If a node appears more than once
            ParentAbsentError: If a non-root node has no parent member
            MultiParentError: If unique_parent is set and a node has
                several parent members
            CycleError: If detect_cycles is set and ancestors loop
            ValueError: If nodes is None or holds None
        """
        if nodes is None:
            raise ValueError("nodes must not be None")

        staged = list(nodes)
        if any(node is None for node in staged):
            raise ValueError("nodes must not contain None")

        if self.config.load_mode is LoadMode.IN_PLACE:
            self._nodes = staged
            self._validate(self._nodes)
        else:
            self._validate(staged)
            self._nodes = staged
        _logger.debug("Loaded %d node(s)", len(staged))

    def _validate(self, nodes: List[T]) -> None:
        """Check that nodes can form a valid tree."""
        roots: List[T] = []
        for node in nodes:
            if self.root_predicate.is_root(node) and node not in roots:
                roots.append(node)
        if len(roots) > 1:
            raise MultiRootError(roots)
        if not roots:
            raise RootAbsentError()

        seen = set()
        for node in nodes:
            if node in seen:
                raise NodeExistsError(node)
            seen.add(node)

        root = roots[0]
        for node in nodes:
            if node == root:
                continue
            parents = self._candidate_parents(nodes, node)
            if not parents:
                raise ParentAbsentError(node)
            if self.config.unique_parent and len(parents) > 1:
                raise MultiParentError(node, parents)

        if self.config.detect_cycles:
            for node in nodes:
                self._walk_up(nodes, node)

    # Derived trees

    def subtree(self, node: T) -> 'GenericTree[T]':
        self._check_node_exists(node)
        nodes = [node] + self.find_younger(node)
        return GenericTree(EqualsRootPredicate(node), self.relation_predicate,
                           nodes, config=self.config)

    def local_tree(self, nodes: Iterable[T]) -> 'GenericTree[T]':
        nodes = list(nodes)
        for node in nodes:
            self._check_node_exists(node)

        # dict keeps first-seen order while dropping repeats
        elders = {}
        for node in nodes:
            for elder in self.find_parents(node) + [node]:
                elders.setdefault(elder, None)
        return GenericTree(self.root_predicate, self.relation_predicate,
                           list(elders), config=self.config)

    # Container protocol

    def __contains__(self, node: object) -> bool:
        return self.contains(node)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._nodes))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.get_root()!r}, nodes={len(self._nodes)})"
