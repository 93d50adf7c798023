"""User Group Hierarchy - Emit member closures of groups that change between batches."""

from user_group_hierarchy.driver import HierarchyTraversal, KeyedHierarchyTraversal
from user_group_hierarchy.hierarchy import Relation

__all__ = ["HierarchyTraversal", "KeyedHierarchyTraversal", "Relation"]
