"""Reachability over the group hierarchy: member closures and person paths."""

from collections.abc import Collection, Iterator, Mapping, Sequence
from typing import TypeAlias

from user_group_hierarchy.hierarchy.types import GroupId, ItemKind, PathRecord, PersonId

PATH_SEPARATOR = " -> "

GroupEdges: TypeAlias = Mapping[GroupId, Sequence[GroupId]]
MemberEdges: TypeAlias = Mapping[GroupId, Sequence[PersonId]]


def check_max_depth(max_depth: int | None) -> None:
    """Reject depth limits that could never reach a person."""
    if max_depth is not None and max_depth < 1:
        raise ValueError(f"max_depth must be a positive integer or None, got {max_depth}")


def closure(
    group: GroupId,
    subgroups: GroupEdges,
    members: MemberEdges,
    visiting: Collection[GroupId] | None = None,
    max_depth: int | None = None,
) -> set[PersonId]:
    """
    Collect every person reachable from ``group`` through subgroup edges.

    Uses an explicit stack instead of recursion. Each group is expanded once per
    call, which also truncates cycles: a subgroup that was already reached is
    not walked again. Groups listed in ``visiting`` are treated as already on
    the current path and are never expanded; if ``group`` itself is among them
    the result is empty.

    With ``max_depth`` set, only persons at depth <= max_depth are counted,
    where the direct members of ``group`` are at depth 1. A group reached again
    at a shallower depth is re-expanded so the limit is applied to the shortest
    route.
    """
    check_max_depth(max_depth)
    blocked = set(visiting) if visiting else set()
    if group in blocked:
        return set()

    persons: set[PersonId] = set()
    # Depth at which each group was (last) scheduled; the start group is depth 0.
    scheduled: dict[GroupId, int] = {group: 0}
    stack: list[tuple[GroupId, int]] = [(group, 0)]

    while stack:
        node, depth = stack.pop()
        if scheduled[node] < depth:
            # Superseded by a shallower route pushed later.
            continue

        persons.update(members.get(node, ()))

        if max_depth is not None and depth + 1 >= max_depth:
            continue

        for sub in subgroups.get(node, ()):
            if sub in blocked:
                continue
            seen_at = scheduled.get(sub)
            if seen_at is not None and (max_depth is None or seen_at <= depth + 1):
                continue
            scheduled[sub] = depth + 1
            stack.append((sub, depth + 1))

    return persons


def iter_person_paths(
    start_node: GroupId,
    subgroups: GroupEdges,
    members: MemberEdges,
    max_depth: int | None = None,
) -> Iterator[PathRecord]:
    """
    Depth-first walk from ``start_node`` yielding one record per person reached.

    A group pushes its subgroups and then its members, so the most recently
    pushed child (its last member) is visited first. Nodes are visited at most
    once, keyed by identifier, which also stops cycles. Groups at ``max_depth``
    are not expanded.

    Unlike closure(), a group is never revisited from a shorter route found
    later. With ``max_depth`` set, a group first reached at the limit stays
    unexpanded, so persons beneath it may be missing even though closure()
    with the same limit counts them.
    """
    check_max_depth(max_depth)
    visited: set[str] = set()
    stack: list[tuple[str, ItemKind, int, str]] = [(start_node, ItemKind.GROUP, 0, start_node)]

    while stack:
        node, kind, depth, path = stack.pop()
        if node in visited:
            continue
        visited.add(node)

        if kind == ItemKind.PERSON:
            yield PathRecord(node, depth, path)
            continue

        if max_depth is not None and depth >= max_depth:
            continue

        for sub in subgroups.get(node, ()):
            if sub not in visited:
                stack.append((sub, ItemKind.GROUP, depth + 1, path + PATH_SEPARATOR + sub))
        for person in members.get(node, ()):
            if person not in visited:
                stack.append((person, ItemKind.PERSON, depth + 1, path + PATH_SEPARATOR + person))
