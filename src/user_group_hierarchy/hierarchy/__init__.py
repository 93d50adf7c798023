"""Hierarchy graph construction and reachability."""

from user_group_hierarchy.hierarchy.build import BuildStats, build_adjacency
from user_group_hierarchy.hierarchy.closure import closure, iter_person_paths
from user_group_hierarchy.hierarchy.types import (
    AdjacencyGraph,
    GroupRecord,
    ItemKind,
    PathRecord,
    Relation,
)

__all__ = [
    "AdjacencyGraph",
    "BuildStats",
    "GroupRecord",
    "ItemKind",
    "PathRecord",
    "Relation",
    "build_adjacency",
    "closure",
    "iter_person_paths",
]
