"""Change-only emission of group closures across batches."""

import logging
from collections.abc import Callable

from user_group_hierarchy.emitter.snapshot import ClosureSnapshot
from user_group_hierarchy.hierarchy.closure import check_max_depth, closure
from user_group_hierarchy.hierarchy.types import AdjacencyGraph, GroupId, GroupRecord, PersonId

logger = logging.getLogger(__name__)


class IncrementalEmitter:
    """
    Emit the member closure of every group whose closure changed.

    The snapshot is the only state carried between batches. Updates for a batch
    are staged and committed together once every closure has been computed and
    forwarded, so a failure part-way through leaves the snapshot as it was.
    """

    def __init__(
        self,
        snapshot: ClosureSnapshot | None = None,
        diffing: bool = True,
        max_depth: int | None = None,
    ):
        check_max_depth(max_depth)
        self.snapshot = snapshot if snapshot is not None else ClosureSnapshot()
        self._diffing = diffing
        self._max_depth = max_depth

    def process_batch(
        self,
        graph: AdjacencyGraph,
        forward: Callable[[GroupRecord], None] | None = None,
    ) -> list[GroupRecord]:
        """
        Compute closures for all groups in ``graph`` and return the changed ones.

        Changed records are passed to ``forward`` before the snapshot is
        committed, so a failing sink leaves the snapshot untouched and a retry of
        the batch emits the same records again. A graph with no groups (every
        relation was dropped) evicts the whole snapshot.
        """
        records: list[GroupRecord] = []
        staged: dict[GroupId, set[PersonId]] = {}

        if not graph.members:
            # No membership information yet: nothing is emitted, not even empty sets.
            logger.info(
                "No members in batch of %d groups, skipping emission", len(graph.all_groups)
            )
        else:
            for group in sorted(graph.all_groups):
                current = closure(
                    group, graph.subgroups, graph.members, max_depth=self._max_depth
                )
                if self._diffing and not self.snapshot.is_changed(group, current):
                    logger.debug("Group %s unchanged, skipping", group)
                    continue

                logger.debug(
                    "Group %s changed: previous=%s current=%s",
                    group,
                    self.snapshot.get(group),
                    current,
                )
                staged[group] = current
                records.append(GroupRecord(group, sorted(current)))

        if forward is not None:
            for record in records:
                forward(record)

        evicted = self.snapshot.commit(staged, graph.all_groups)
        for group in evicted:
            logger.info("Group %s removed from hierarchy, clearing snapshot", group)

        logger.info(
            "Batch done: %d groups, %d emitted, %d evicted",
            len(graph.all_groups),
            len(records),
            len(evicted),
        )
        return records
