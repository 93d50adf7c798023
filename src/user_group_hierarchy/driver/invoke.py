"""Invocation driver: one batch in, changed records out."""

import logging
from collections.abc import Hashable, Iterable, Sequence
from typing import TypeAlias

from user_group_hierarchy.driver.collector import Collector, OutputRecord
from user_group_hierarchy.driver.config import OutputShape, TraversalConfig
from user_group_hierarchy.driver.parse import iter_relations
from user_group_hierarchy.emitter import IncrementalEmitter
from user_group_hierarchy.hierarchy import Relation, build_adjacency, iter_person_paths

logger = logging.getLogger(__name__)

# Name the traversal is registered under by the surrounding framework.
FUNCTION_NAME = "USERS_IN_GROUPS"

InputRow: TypeAlias = Relation | Sequence[str | None]


class HierarchyTraversal:
    """
    Stateful traversal for one key/partition.

    Owns an IncrementalEmitter, whose snapshot is the only state kept between
    calls to eval(). Calls must be sequential.
    """

    def __init__(self, collector: Collector, config: TraversalConfig | None = None):
        self.collector = collector
        self.config = config if config is not None else TraversalConfig()
        self.emitter = IncrementalEmitter(
            diffing=self.config.diffing,
            max_depth=self.config.max_depth,
        )

    def eval(self, rows: Iterable[InputRow] | None, start_node: str | None = None) -> int:
        """
        Process one batch and forward the resulting records to the collector.

        Returns the number of records emitted.
        """
        paths_mode = self.config.output == OutputShape.PERSON_PATH
        if paths_mode and not start_node:
            raise ValueError("start_node is required for person-path output")

        if rows is None:
            logger.warning("Hierarchy data is None, nothing to do")
            return 0

        relations = list(iter_relations(rows))
        if not relations:
            logger.info("Empty batch, nothing to do")
            return 0

        graph, stats = build_adjacency(relations, null_child=self.config.null_child)
        if stats.dropped:
            logger.warning(
                "Dropped %d of %d relations (empty parent=%d, unknown kind=%d)",
                stats.dropped,
                stats.relations_read,
                stats.null_parents,
                stats.unknown_kinds,
            )

        if not paths_mode:
            return len(self.emitter.process_batch(graph, forward=self.collector.collect))

        records: list[OutputRecord] = list(
            iter_person_paths(
                start_node, graph.subgroups, graph.members, max_depth=self.config.max_depth
            )
        )
        for record in records:
            self.collector.collect(record)
        return len(records)

    def __str__(self) -> str:
        return FUNCTION_NAME


class KeyedHierarchyTraversal:
    """One independent HierarchyTraversal, and snapshot, per partition key."""

    def __init__(self, collector: Collector, config: TraversalConfig | None = None):
        self.collector = collector
        self.config = config if config is not None else TraversalConfig()
        self._instances: dict[Hashable, HierarchyTraversal] = {}

    def for_key(self, key: Hashable) -> HierarchyTraversal:
        """Return the traversal owning ``key``, creating it on first use."""
        traversal = self._instances.get(key)
        if traversal is None:
            logger.debug("Creating traversal for key %r", key)
            traversal = HierarchyTraversal(self.collector, self.config)
            self._instances[key] = traversal
        return traversal

    def eval(
        self,
        key: Hashable,
        rows: Iterable[InputRow] | None,
        start_node: str | None = None,
    ) -> int:
        return self.for_key(key).eval(rows, start_node=start_node)

    def keys(self) -> list[Hashable]:
        return list(self._instances)

    def drop(self, key: Hashable) -> bool:
        """Forget the state for ``key``. Returns False if it was unknown."""
        return self._instances.pop(key, None) is not None
