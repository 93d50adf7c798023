"""Last-emitted closure per group, kept between batches."""

from collections.abc import Iterator, Mapping, Set

from user_group_hierarchy.hierarchy.types import GroupId, PersonId


class ClosureSnapshot:
    """Per-instance memory of the member set last emitted for each group."""

    def __init__(self) -> None:
        self._closures: dict[GroupId, frozenset[PersonId]] = {}

    def __contains__(self, group: object) -> bool:
        return group in self._closures

    def __len__(self) -> int:
        return len(self._closures)

    def __iter__(self) -> Iterator[GroupId]:
        return iter(self._closures)

    def get(self, group: GroupId) -> frozenset[PersonId] | None:
        return self._closures.get(group)

    def is_changed(self, group: GroupId, current: Set[PersonId]) -> bool:
        """True when the group is unknown or its stored set differs from ``current``."""
        previous = self._closures.get(group)
        return previous is None or previous != current

    def commit(
        self,
        updates: Mapping[GroupId, Set[PersonId]],
        live_groups: Set[GroupId],
    ) -> list[GroupId]:
        """
        Apply staged closures and evict groups that are no longer live.

        Returns the evicted group identifiers.
        """
        for group, persons in updates.items():
            self._closures[group] = frozenset(persons)

        evicted = [group for group in self._closures if group not in live_groups]
        for group in evicted:
            del self._closures[group]
        return evicted
