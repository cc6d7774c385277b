from datetime import date

import pytest
from pydantic import ValidationError

from financeflow.manager import CategorizerService
from financeflow.models import (
    Category,
    ChatMessage,
    PaymentMethod,
    TransactionInput,
    TransactionType,
)

TODAY = date(2024, 6, 10)


@pytest.fixture
def service() -> CategorizerService:
    return CategorizerService(clock=lambda: TODAY)


def test_categorize_uses_rules(service: CategorizerService) -> None:
    result = service.categorize("Spotify Premium")
    assert result.category == Category.LEISURE
    assert result.source == "rules"


def test_categorize_keeps_explicit_category(service: CategorizerService) -> None:
    result = service.categorize("Spotify Premium", Category.BILLS)
    assert result.category == Category.BILLS
    assert result.source == "explicit"


def test_parse_uses_service_clock(service: CategorizerService) -> None:
    result = service.parse("lanche ontem")
    assert result.date == date(2024, 6, 9)
    assert result.cleaned_description == "lanche"


def test_build_draft_fills_omitted_fields(service: CategorizerService) -> None:
    draft = service.build_draft(TransactionInput(
        type=TransactionType.EXPENSE,
        amount=52.9,
        description="  almoço no restaurante ",
    ))
    assert draft.category == Category.FOOD
    assert draft.description == "almoço no restaurante"
    assert draft.payment_method == PaymentMethod.OTHER
    assert draft.date == TODAY
    assert draft.source == "web"


def test_build_draft_respects_explicit_fields(service: CategorizerService) -> None:
    draft = service.build_draft(TransactionInput(
        type=TransactionType.INCOME,
        amount=3000,
        description="salario",
        category=Category.OTHER,
        payment_method=PaymentMethod.PIX,
        date=date(2024, 5, 5),
    ))
    assert draft.type == TransactionType.INCOME
    assert draft.category == Category.OTHER
    assert draft.payment_method == PaymentMethod.PIX
    assert draft.date == date(2024, 5, 5)


def test_build_chat_draft_extracts_metadata(service: CategorizerService) -> None:
    draft = service.build_chat_draft(ChatMessage(text="uber ontem pix", amount=23.5, type="gasto"))
    assert draft.type == TransactionType.EXPENSE
    assert draft.amount == 23.5
    assert draft.category == Category.TRANSPORT
    assert draft.description == "uber"
    assert draft.payment_method == PaymentMethod.PIX
    assert draft.date == date(2024, 6, 9)
    assert draft.source == "whatsapp"


def test_build_chat_draft_explicit_fields_win(service: CategorizerService) -> None:
    draft = service.build_chat_draft(ChatMessage(
        text="mercado ontem pix",
        amount=100,
        type="receita",
        date="01/02/2024",
        payment_method=PaymentMethod.CASH,
    ))
    assert draft.type == TransactionType.INCOME
    assert draft.date == date(2024, 2, 1)
    assert draft.payment_method == PaymentMethod.CASH
    assert draft.description == "mercado"


def test_build_chat_draft_metadata_only(service: CategorizerService) -> None:
    draft = service.build_chat_draft(ChatMessage(text="pix hoje", amount=10))
    assert draft.description == "pix hoje"
    assert draft.category == Category.OTHER
    assert draft.payment_method == PaymentMethod.PIX
    assert draft.date == TODAY


def test_chat_message_validation() -> None:
    with pytest.raises(ValidationError):
        ChatMessage(text="uber", amount=0)
    with pytest.raises(ValidationError):
        ChatMessage(text="uber", amount=10, date="31/02/2024")
    with pytest.raises(ValidationError):
        ChatMessage(text="uber", amount=10, type="doacao")


def test_catalog_lists_every_value(service: CategorizerService) -> None:
    catalog = service.catalog()
    assert [c["name"] for c in catalog["categories"]] == [c.value for c in Category]
    assert {"name": "credit", "label": "💳 Crédito"} in catalog["payment_methods"]
