"""Shared hierarchy fixtures."""

import pytest

# Hospital hierarchy: 7 groups, 8 distinct persons.
HOSPITAL_ROWS = [
    ("region_1", "NULL", "GROUP"),
    ("region_1", "hospital_west", "GROUP"),
    ("region_1", "hospital_east", "GROUP"),
    ("hospital_west", "department_1", "GROUP"),
    ("hospital_east", "department_11", "GROUP"),
    ("hospital_west", "nurses_gp_1", "GROUP"),
    ("department_1", "nurses_gp_2", "GROUP"),
    ("department_1", "Julie", "PERSON"),
    ("nurses_gp_1", "Himani", "PERSON"),
    ("nurses_gp_1", "Laura", "PERSON"),
    ("nurses_gp_2", "Bratt", "PERSON"),
    ("nurses_gp_2", "Caroll", "PERSON"),
    ("nurses_gp_2", "Lucy", "PERSON"),
    ("nurses_gp_2", "Mary", "PERSON"),
    ("department_11", "Paul", "PERSON"),
    ("department_11", "Julie", "PERSON"),
]


@pytest.fixture
def hospital_rows() -> list[tuple[str, str, str]]:
    return list(HOSPITAL_ROWS)
