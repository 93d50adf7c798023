"""Traversal configuration passed explicitly to the driver."""

from dataclasses import dataclass
from enum import StrEnum

from user_group_hierarchy.hierarchy.closure import check_max_depth
from user_group_hierarchy.hierarchy.types import NULL_CHILD


class OutputShape(StrEnum):
    """What the driver emits for a batch."""

    # One (group, members) record per changed group.
    GROUP_CLOSURE = "group_closure"
    # One (person, depth, path) record per person under a start node.
    PERSON_PATH = "person_path"


@dataclass(frozen=True, slots=True)
class TraversalConfig:
    """
    Options for one traversal instance.

    ``diffing`` only applies to GROUP_CLOSURE output; the person-path walk keeps
    no state between batches.
    """

    diffing: bool = True
    max_depth: int | None = None
    output: OutputShape = OutputShape.GROUP_CLOSURE
    null_child: str = NULL_CHILD

    def __post_init__(self) -> None:
        check_max_depth(self.max_depth)
