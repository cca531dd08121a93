"""Core abstractions for PredicateTree.

This package contains the predicates, the tree engine and the traversers
built on top of it.
"""

from .predicates import (
    RootPredicate,
    RelationPredicate,
    FunctionRootPredicate,
    FunctionRelationPredicate,
    EqualsRootPredicate,
    as_root_predicate,
    as_relation_predicate,
)
from .tree import IterableTree, Tree, GenericTree
from .traverser import TreeTraverser, create_traverser

__all__ = [
    "RootPredicate",
    "RelationPredicate",
    "FunctionRootPredicate",
    "FunctionRelationPredicate",
    "EqualsRootPredicate",
    "as_root_predicate",
    "as_relation_predicate",
    "IterableTree",
    "Tree",
    "GenericTree",
    "TreeTraverser",
    "create_traverser",
]
