"""Downstream sink interface for emitted records."""

from typing import Protocol, TypeAlias

from user_group_hierarchy.hierarchy.types import GroupRecord, PathRecord

OutputRecord: TypeAlias = GroupRecord | PathRecord


class Collector(Protocol):
    """Anything that accepts emitted records one at a time."""

    def collect(self, record: OutputRecord) -> None: ...


class ListCollector:
    """Collector that keeps every record in a list."""

    def __init__(self, rows: list[OutputRecord] | None = None):
        self.rows: list[OutputRecord] = rows if rows is not None else []

    def collect(self, record: OutputRecord) -> None:
        self.rows.append(record)

    def clear(self) -> None:
        self.rows.clear()
