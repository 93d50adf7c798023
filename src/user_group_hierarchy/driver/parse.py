"""Source adapters turning raw rows and text lines into relations."""

import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from user_group_hierarchy.hierarchy.types import Relation

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"
COMMENT_PREFIX = "#"


def relation_from_row(row: Relation | Sequence[str | None]) -> Relation | None:
    """
    Coerce one input row into a Relation.

    Accepts Relation instances and (parent, child, kind) sequences. Returns None
    for anything else.
    """
    if isinstance(row, Relation):
        return row
    if isinstance(row, (str, bytes)) or not isinstance(row, Sequence) or len(row) != 3:
        return None

    parent, child, kind = row
    return Relation(parent, child, "" if kind is None else kind)


def iter_relations(rows: Iterable[Relation | Sequence[str | None]]) -> Iterator[Relation]:
    """Yield relations from raw rows, skipping rows of the wrong shape."""
    for row in rows:
        relation = relation_from_row(row)
        if relation is None:
            logger.warning("Skipping row that is not a (parent, child, kind) triple: %r", row)
            continue
        yield relation


def parse_relation_line(raw_line: str) -> Relation | None:
    """
    Parse one ``parent|child|kind`` line.

    Empty fields become None. Returns None for blank, comment or malformed lines.
    """
    line = raw_line.strip()
    if not line or line.startswith(COMMENT_PREFIX):
        return None

    parts = [part.strip() for part in line.split(FIELD_SEPARATOR)]
    if len(parts) != 3:
        return None

    parent, child, kind = (part or None for part in parts)
    return Relation(parent, child, kind or "")


def iter_batches(lines: Iterable[str]) -> Iterator[list[Relation]]:
    """
    Group relation lines into batches.

    A blank line closes the current batch; comment lines are ignored and do not
    close it. Malformed lines are logged and skipped.
    """
    batch: list[Relation] = []
    for lineno, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line:
            if batch:
                yield batch
                batch = []
            continue
        if line.startswith(COMMENT_PREFIX):
            continue

        relation = parse_relation_line(line)
        if relation is None:
            logger.warning("Line %d: expected parent|child|kind, got %r", lineno, line)
            continue
        batch.append(relation)

    if batch:
        yield batch


def read_batches(path: str | Path) -> Iterator[list[Relation]]:
    """Read relation batches from a pipe-delimited text file."""
    with open(path, encoding="utf-8") as handle:
        yield from iter_batches(handle)
