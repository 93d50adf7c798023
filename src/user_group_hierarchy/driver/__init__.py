"""Batch invocation, configuration and sink/source adapters."""

from user_group_hierarchy.driver.collector import Collector, ListCollector
from user_group_hierarchy.driver.config import OutputShape, TraversalConfig
from user_group_hierarchy.driver.invoke import (
    FUNCTION_NAME,
    HierarchyTraversal,
    KeyedHierarchyTraversal,
)

__all__ = [
    "FUNCTION_NAME",
    "Collector",
    "HierarchyTraversal",
    "KeyedHierarchyTraversal",
    "ListCollector",
    "OutputShape",
    "TraversalConfig",
]
