from collections.abc import Callable
from datetime import date
from typing import Any

from financeflow.classifiers.category import classify_category
from financeflow.domain.extraction import extract_payment_and_date
from financeflow.domain.formatting import category_icon, format_payment_method
from financeflow.logger import get_logger
from financeflow.models import (
    DEFAULT_PAYMENT_METHOD,
    CategorizationResult,
    Category,
    ChatMessage,
    ParseResult,
    PaymentMethod,
    TransactionDraft,
    TransactionInput,
)

logger = get_logger(__name__)

SOURCE_WEB = "web"
SOURCE_WHATSAPP = "whatsapp"


class CategorizerService:
    """
    Fills in what a caller left out of a transaction before it is stored.

    Explicit values always win; the rule classifier and the free-text
    extractor only supply defaults.
    """

    def __init__(self, clock: Callable[[], date] = date.today):
        self.clock = clock

    def categorize(self, description: str | None, explicit: Category | None = None) -> CategorizationResult:
        if explicit is not None:
            return CategorizationResult(category=explicit, source="explicit")

        category = classify_category(description)
        logger.debug(f"Rules classified '{(description or '')[:50]}' as '{category.value}'")
        return CategorizationResult(category=category, source="rules")

    def parse(self, text: str | None) -> ParseResult:
        result = extract_payment_and_date(text, today=self.clock())
        logger.debug(
            f"Parsed '{(text or '')[:50]}': payment={result.payment_method.value}, "
            f"date={result.date.isoformat()}, description='{result.cleaned_description}'"
        )
        return result

    def build_draft(self, data: TransactionInput) -> TransactionDraft:
        description = data.description.strip()
        draft = TransactionDraft(
            type=data.type,
            amount=data.amount,
            category=self.categorize(description, data.category).category,
            description=description,
            date=data.date or self.clock(),
            payment_method=data.payment_method or DEFAULT_PAYMENT_METHOD,
            source=SOURCE_WEB,
        )
        self._log_draft(draft)
        return draft

    def build_chat_draft(self, message: ChatMessage) -> TransactionDraft:
        parsed = self.parse(message.text)
        # A phrase made only of metadata ("pix hoje") keeps its original text
        description = parsed.cleaned_description or message.text.strip()

        draft = TransactionDraft(
            type=message.type,
            amount=message.amount,
            category=self.categorize(parsed.cleaned_description, message.category).category,
            description=description,
            date=message.date or parsed.date,
            payment_method=message.payment_method or parsed.payment_method,
            source=SOURCE_WHATSAPP,
        )
        self._log_draft(draft)
        return draft

    def catalog(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "categories": [
                {"name": category.value, "icon": category_icon(category)}
                for category in Category
            ],
            "payment_methods": [
                {"name": method.value, "label": format_payment_method(method)}
                for method in PaymentMethod
            ],
        }

    @staticmethod
    def _log_draft(draft: TransactionDraft) -> None:
        logger.info(
            "[DRAFT] %s %.2f '%s' -> category=%s payment=%s date=%s source=%s",
            draft.type.value,
            draft.amount,
            draft.description[:50],
            draft.category.value,
            draft.payment_method.value,
            draft.date.isoformat(),
            draft.source,
        )
