from __future__ import annotations

from datetime import date

import pytest

from brushwork.domain.reconciliation import parse_broadcast_date, parse_material_list


def test_parse_material_list_handles_single_quotes_and_line_breaks() -> None:
    raw = "['Alizarin Crimson', 'Bright Red',\r\n 'Titanium White']"

    assert parse_material_list(raw) == ["Alizarin Crimson", "Bright Red", "Titanium White"]


def test_parse_material_list_strips_backslashes_and_duplicates() -> None:
    raw = "['Van Dyke Brown\\\\', 'Van Dyke Brown']"

    assert parse_material_list(raw) == ["Van Dyke Brown"]


def test_parse_material_list_drops_escaped_line_breaks() -> None:
    raw = "['Sap Green\\r\\n', 'Titanium White\\n', 'Van Dyke Brown\\r']"

    assert parse_material_list(raw) == ["Sap Green", "Titanium White", "Van Dyke Brown"]


def test_parse_material_list_accepts_empty_list() -> None:
    assert parse_material_list("[]") == []


@pytest.mark.parametrize("raw", ["", "not a list", "['unterminated", "{'a': 1}", "[1, 2]"])
def test_parse_material_list_rejects_malformed_input(raw: str) -> None:
    with pytest.raises(ValueError):  # noqa: PT011
        parse_material_list(raw)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("January 11, 1983", date(1983, 1, 11)),
        ("Jan 11, 1983", date(1983, 1, 11)),
        ("  February  1,   1983 ", date(1983, 2, 1)),
        ("1994-05-17", date(1994, 5, 17)),
    ],
)
def test_parse_broadcast_date(raw: str, expected: date) -> None:
    assert parse_broadcast_date(raw) == expected


@pytest.mark.parametrize("raw", ["", "sometime in 1983", "February 30, 1983"])
def test_parse_broadcast_date_rejects_unrecognised_values(raw: str) -> None:
    with pytest.raises(ValueError, match="unrecognised date"):
        parse_broadcast_date(raw)
