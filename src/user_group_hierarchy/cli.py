"""Command-line replay of relation batches through a hierarchy traversal."""

import argparse
import logging
import sys

from user_group_hierarchy.driver import (
    HierarchyTraversal,
    ListCollector,
    OutputShape,
    TraversalConfig,
)
from user_group_hierarchy.driver.collector import OutputRecord
from user_group_hierarchy.driver.parse import read_batches
from user_group_hierarchy.hierarchy import GroupRecord


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="user-group-hierarchy",
        description="Replay hierarchy batches and print the group closures that change.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the input file (pipe-delimited: Parent|Child|Kind, blank line between batches)",
    )

    parser.add_argument(
        "--start-node",
        default=None,
        help="Print person paths under this node instead of group closures",
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Only count persons at most this many levels down (default: unbounded)",
    )

    parser.add_argument(
        "--no-diff",
        action="store_true",
        help="Emit every group on every batch, not only changed ones",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    return parser


def format_record(batch_no: int, record: OutputRecord) -> str:
    """Render one emitted record as a tab-separated line prefixed by its batch number."""
    if isinstance(record, GroupRecord):
        return f"{batch_no}\t{record.group}\t{','.join(record.members)}"
    return f"{batch_no}\t{record.person}\t{record.depth}\t{record.path}"


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    if args.max_depth is not None and args.max_depth < 1:
        parser.error(f"--max-depth must be a positive integer, got {args.max_depth}")

    config = TraversalConfig(
        diffing=not args.no_diff,
        max_depth=args.max_depth,
        output=OutputShape.PERSON_PATH if args.start_node else OutputShape.GROUP_CLOSURE,
    )
    collector = ListCollector()
    traversal = HierarchyTraversal(collector, config)

    for batch_no, batch in enumerate(read_batches(args.input_file), start=1):
        collector.clear()
        traversal.eval(batch, start_node=args.start_node)
        for record in collector.rows:
            print(format_record(batch_no, record))

    return 0


if __name__ == "__main__":
    sys.exit(main())
