from datetime import date

from financeflow.domain.formatting import (
    category_icon,
    format_currency,
    format_date,
    format_payment_method,
)
from financeflow.models import Category, PaymentMethod


def test_format_date() -> None:
    assert format_date(date(2024, 3, 5)) == "05/03/2024"


def test_format_currency() -> None:
    assert format_currency(1234.56) == "R$ 1.234,56"
    assert format_currency(0) == "R$ 0,00"
    assert format_currency(1000000) == "R$ 1.000.000,00"
    assert format_currency(-5) == "-R$ 5,00"


def test_payment_labels() -> None:
    assert format_payment_method(PaymentMethod.PIX) == "📱 PIX"
    assert format_payment_method("cash") == "💵 Dinheiro"
    assert format_payment_method("cheque") == "cheque"


def test_category_icons() -> None:
    assert category_icon(Category.FOOD) == "🍔"
    assert category_icon("Other") == "📦"
    assert category_icon("Unknown") == "📌"
