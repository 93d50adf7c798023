"""Tests for relation source adapters."""

from user_group_hierarchy.driver.parse import (
    iter_batches,
    iter_relations,
    parse_relation_line,
    read_batches,
    relation_from_row,
)
from user_group_hierarchy.hierarchy.types import Relation


def test_relation_from_row_accepts_triples_and_relations() -> None:
    relation = Relation("team", "Alice", "PERSON")

    assert relation_from_row(relation) is relation
    assert relation_from_row(("team", "Alice", "PERSON")) == relation
    assert relation_from_row(["team", None, "GROUP"]) == Relation("team", None, "GROUP")
    assert relation_from_row(("team", "x", None)) == Relation("team", "x", "")


def test_relation_from_row_rejects_other_shapes() -> None:
    assert relation_from_row(("team", "Alice")) is None
    assert relation_from_row("abc") is None
    assert relation_from_row(42) is None


def test_iter_relations_skips_bad_rows(caplog) -> None:
    rows = [("a", "b", "GROUP"), ("bad",), ("b", "p", "PERSON")]

    assert list(iter_relations(rows)) == [
        Relation("a", "b", "GROUP"),
        Relation("b", "p", "PERSON"),
    ]
    assert "Skipping row" in caplog.text


def test_parse_relation_line_valid() -> None:
    assert parse_relation_line("region|hospW|GROUP\n") == Relation("region", "hospW", "GROUP")
    assert parse_relation_line("region||GROUP") == Relation("region", None, "GROUP")
    assert parse_relation_line("|X|GROUP") == Relation(None, "X", "GROUP")


def test_parse_relation_line_invalid() -> None:
    assert parse_relation_line("") is None
    assert parse_relation_line("\n") is None
    assert parse_relation_line("# comment") is None
    assert parse_relation_line("only|two") is None
    assert parse_relation_line("a|b|c|d") is None


def test_iter_batches_splits_on_blank_lines() -> None:
    lines = [
        "# first batch\n",
        "region|hospW|GROUP\n",
        "hospW|Alice|PERSON\n",
        "\n",
        "\n",
        "region|NULL|GROUP\n",
        "broken line\n",
        "# comments do not close a batch\n",
        "other|Bob|PERSON\n",
    ]

    batches = list(iter_batches(lines))

    assert batches == [
        [Relation("region", "hospW", "GROUP"), Relation("hospW", "Alice", "PERSON")],
        [Relation("region", "NULL", "GROUP"), Relation("other", "Bob", "PERSON")],
    ]


def test_read_batches(tmp_path) -> None:
    path = tmp_path / "batches.txt"
    path.write_text("a|p|PERSON\n\nb|q|PERSON\n", encoding="utf-8")

    assert list(read_batches(path)) == [
        [Relation("a", "p", "PERSON")],
        [Relation("b", "q", "PERSON")],
    ]
