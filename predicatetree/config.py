"""Configuration system for PredicateTree.

This module defines how callers tune the strictness of a tree: how bulk
loads are applied and which extra consistency checks run against the
relation predicate.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class LoadMode(Enum):
    """How a bulk load replaces the stored node collection."""
    STAGED = "staged"        # Validate a copy, swap only on success
    IN_PLACE = "in_place"    # Replace storage first, then validate


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    BREADTH_FIRST = "bfs"           # Level by level
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent


@dataclass
class TreeConfig:
    """Complete configuration for a GenericTree.

    The defaults trust the predicates completely and keep a tree's prior
    state when a bulk load is rejected.
    """

    # Bulk loading
    load_mode: LoadMode = LoadMode.STAGED

    # Predicate consistency checks
    detect_cycles: bool = False   # Raise CycleError instead of looping
    unique_parent: bool = False   # Raise MultiParentError on ambiguous parents

    @classmethod
    def strict(cls) -> 'TreeConfig':
        """Create config with every consistency check enabled.

        Returns:
            TreeConfig that rejects cycles and ambiguous parents
        """
        return cls(
            load_mode=LoadMode.STAGED,
            detect_cycles=True,
            unique_parent=True,
        )

    @classmethod
    def legacy(cls) -> 'TreeConfig':
        """Create config matching the clear-then-validate load behavior.

        A rejected load leaves the rejected collection stored.

        Returns:
            TreeConfig using in-place loading and no extra checks
        """
        return cls(load_mode=LoadMode.IN_PLACE)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.load_mode, LoadMode):
            errors.append(f"load_mode must be a LoadMode, got {self.load_mode!r}")

        if not isinstance(self.detect_cycles, bool):
            errors.append("detect_cycles must be a bool")

        if not isinstance(self.unique_parent, bool):
            errors.append("unique_parent must be a bool")

        return errors
