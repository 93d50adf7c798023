"""Shared type definitions for hierarchy processing."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import NamedTuple, TypeAlias

GroupId: TypeAlias = str
PersonId: TypeAlias = str
SubgroupMap: TypeAlias = dict[GroupId, list[GroupId]]
MemberMap: TypeAlias = dict[GroupId, list[PersonId]]

# Placeholder child value meaning "group exists, nothing recorded under it".
NULL_CHILD = "NULL"


class ItemKind(StrEnum):
    """Kind of the child item in a hierarchy relation."""

    GROUP = "GROUP"
    PERSON = "PERSON"


@dataclass(frozen=True, slots=True)
class Relation:
    """One hierarchy edge: parent group -> child item.

    ``kind`` keeps the raw string so unknown kinds can be reported by the builder.
    """

    parent: GroupId | None
    child: str | None
    kind: str


@dataclass(slots=True)
class AdjacencyGraph:
    """Adjacency mappings for one batch of relations."""

    subgroups: SubgroupMap = field(default_factory=dict)
    members: MemberMap = field(default_factory=dict)
    all_groups: set[GroupId] = field(default_factory=set)


class GroupRecord(NamedTuple):
    """Emitted closure for one group."""

    group: GroupId
    members: list[PersonId]


class PathRecord(NamedTuple):
    """One person reached by a path-tracking walk."""

    person: PersonId
    depth: int
    path: str
