"""PredicateTree - Trees over any value, shaped by predicates.

PredicateTree treats any collection of related values (a class hierarchy,
a taxonomy, an org chart) as a tree. Nodes carry no parent/child pointers;
two caller-supplied predicates decide which node is the root and which
node is the parent of which.

    from predicatetree import GenericTree

    tree = GenericTree(lambda c: c is object,
                       lambda parent, child: child.__base__ is parent,
                       [object, BaseException, Exception])
"""

import logging

__version__ = "0.1.0"

from .config import LoadMode, TraversalStrategy, TreeConfig
from .exceptions import (
    ConfigurationError,
    CycleError,
    InvalidRootError,
    MultiParentError,
    MultiRootError,
    NodeAbsentError,
    NodeExistsError,
    ParentAbsentError,
    RootAbsentError,
    TreeError,
)
from .core.predicates import (
    RootPredicate,
    RelationPredicate,
    FunctionRootPredicate,
    FunctionRelationPredicate,
    EqualsRootPredicate,
)
from .core.tree import IterableTree, Tree, GenericTree
from .core.traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .api import (
    build_tree,
    traverse_tree,
    count_nodes,
    find_nodes,
    get_depth,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    format_tree,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    'IterableTree',
    'Tree',
    'GenericTree',
    'RootPredicate',
    'RelationPredicate',
    'FunctionRootPredicate',
    'FunctionRelationPredicate',
    'EqualsRootPredicate',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'create_traverser',
    # Config
    'TreeConfig',
    'LoadMode',
    'TraversalStrategy',
    # Errors
    'TreeError',
    'NodeAbsentError',
    'NodeExistsError',
    'ParentAbsentError',
    'InvalidRootError',
    'RootAbsentError',
    'MultiRootError',
    'CycleError',
    'MultiParentError',
    'ConfigurationError',
    # API
    'build_tree',
    'traverse_tree',
    'count_nodes',
    'find_nodes',
    'get_depth',
    'get_leaf_nodes',
    'get_tree_paths',
    'get_tree_stats',
    'format_tree',
]
