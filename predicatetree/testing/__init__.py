"""Testing utilities for PredicateTree consumers."""

from .fixtures import EXCEPTION_CLASSES, class_hierarchy_tree, parent_map_tree

__all__ = ['EXCEPTION_CLASSES', 'class_hierarchy_tree', 'parent_map_tree']
