"""Graph construction from flat hierarchy relations."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from user_group_hierarchy.hierarchy.types import (
    NULL_CHILD,
    AdjacencyGraph,
    ItemKind,
    Relation,
)

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """Statistics from a build_adjacency call."""

    relations_read: int = 0
    edges_added: int = 0
    empty_children: int = 0
    null_parents: int = 0
    unknown_kinds: int = 0

    @property
    def dropped(self) -> int:
        return self.null_parents + self.unknown_kinds


def build_adjacency(
    relations: Iterable[Relation],
    null_child: str = NULL_CHILD,
) -> tuple[AdjacencyGraph, BuildStats]:
    """
    Build subgroup and member adjacency lists for one batch.

    Every parent is registered as a group even when the relation carries no
    child, so empty groups are still tracked. GROUP children become groups too;
    PERSON children never do.
    """
    graph = AdjacencyGraph()
    stats = BuildStats()

    for relation in relations:
        stats.relations_read += 1
        parent, child, kind = relation.parent, relation.child, relation.kind

        if not parent:
            stats.null_parents += 1
            logger.warning("Dropping relation with empty parent: child=%r kind=%r", child, kind)
            continue

        graph.all_groups.add(parent)

        if child is None or child == null_child:
            stats.empty_children += 1
            logger.debug("Group %s has no child in this relation", parent)
            continue

        if kind == ItemKind.GROUP:
            graph.all_groups.add(child)
            graph.subgroups.setdefault(parent, []).append(child)
        elif kind == ItemKind.PERSON:
            graph.members.setdefault(parent, []).append(child)
        else:
            stats.unknown_kinds += 1
            logger.warning("Dropping relation %s -> %s with unknown kind %r", parent, child, kind)
            continue

        stats.edges_added += 1

    return graph, stats
