from datetime import date

import pytest

from financeflow.domain.dates import parse_date_token, parse_display_date

TODAY = date(2024, 6, 10)


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("15/03/2024", date(2024, 3, 15)),
        ("5/3/2023", date(2023, 3, 5)),
        ("05/01", date(2024, 1, 5)),
        ("hoje", TODAY),
        ("HOJE", TODAY),
        ("ontem", date(2024, 6, 9)),
        ("amanhã", date(2024, 6, 11)),
    ],
)
def test_parse_date_token(token: str, expected: date) -> None:
    assert parse_date_token(token, TODAY) == expected


def test_relative_dates_cross_month_boundaries() -> None:
    assert parse_date_token("ontem", date(2024, 3, 1)) == date(2024, 2, 29)
    assert parse_date_token("amanha", date(2023, 12, 31)) == date(2024, 1, 1)


@pytest.mark.parametrize(
    "token",
    ["31/02", "00/05", "10/13", "32/01/2024", "hojee", "x15/03", "15/03/24", "15-03-2024", "", None],
)
def test_rejects_non_dates(token: str | None) -> None:
    assert parse_date_token(token, TODAY) is None


def test_parse_display_date() -> None:
    assert parse_display_date("01/02/2024") == date(2024, 2, 1)
    assert parse_display_date(" 9/12/2025 ") == date(2025, 12, 9)
    assert parse_display_date("01/02") is None
    assert parse_display_date("30/02/2024") is None
    assert parse_display_date(None) is None
