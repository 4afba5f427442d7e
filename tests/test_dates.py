from __future__ import annotations

import pytest

from slate_ecosystem.core.dates import previous_date


@pytest.mark.parametrize(
    ("date_str", "days_back", "expected"),
    [
        ("2024-03-01", 1, "2024-02-29"),
        ("2023-03-01", 1, "2023-02-28"),
        ("2024-01-01", 1, "2023-12-31"),
        ("2025-01-15", 0, "2025-01-15"),
        ("2025-01-15", 15, "2024-12-31"),
        ("2025-03-10", 1, "2025-03-09"),
        ("2025-11-03", 1, "2025-11-02"),
        ("2025-12-20", 365, "2024-12-20"),
    ],
)
def test_previous_date_crosses_calendar_boundaries(
    date_str: str, days_back: int, expected: str
) -> None:
    assert previous_date(date_str, days_back) == expected


def test_previous_date_defaults_to_one_day() -> None:
    assert previous_date("2025-10-01") == "2025-09-30"


def test_previous_date_clamps_and_truncates_days_back() -> None:
    assert previous_date("2025-10-10", -4) == "2025-10-10"
    assert previous_date("2025-10-10", 2.9) == "2025-10-08"
    # Not a number at all: behaves like a single step.
    assert previous_date("2025-10-10", "soon") == "2025-10-09"


def test_previous_date_zero_pads_output() -> None:
    assert previous_date("2025-2-3", 1) == "2025-02-02"


@pytest.mark.parametrize(
    "bad",
    ["", "not-a-date", "2025/10/10", "2025-10", "2025-aa-01", "2025-10-10-01"],
)
def test_previous_date_returns_malformed_input_unchanged(bad: str) -> None:
    assert previous_date(bad, 3) == bad


def test_previous_date_does_not_walk_before_year_one() -> None:
    assert previous_date("0001-01-01", 1) == "0001-01-01"


@pytest.mark.parametrize(
    ("date_str", "days_back", "expected"),
    [
        ("2025-02-30", 1, "2025-03-01"),
        ("2024-13-01", 1, "2024-12-31"),
        ("2025-00-10", 0, "2024-12-10"),
        ("2025-03-00", 0, "2025-02-28"),
        ("2025-01-32", 1, "2025-01-31"),
    ],
)
def test_previous_date_rolls_out_of_range_parts_over(
    date_str: str, days_back: int, expected: str
) -> None:
    assert previous_date(date_str, days_back) == expected
