import pytest

from financeflow.domain.text import normalize


def test_normalize_strips_accents_and_case() -> None:
    assert normalize("Farmácia SÃO João") == "farmacia sao joao"
    assert normalize("AÇOUGUE") == "acougue"


@pytest.mark.parametrize("value", [None, ""])
def test_normalize_empty(value: str | None) -> None:
    assert normalize(value) == ""


@pytest.mark.parametrize("value", ["Crédito", "  ÔNIBUS  ", "já", "plain", "ÅÉÎÕÜ ç"])
def test_normalize_is_idempotent(value: str) -> None:
    once = normalize(value)
    assert normalize(once) == once


def test_normalize_keeps_whitespace_and_digits() -> None:
    assert normalize("  15/03 Hoje ") == "  15/03 hoje "
