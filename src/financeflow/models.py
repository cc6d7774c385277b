import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from financeflow.domain.dates import parse_display_date


class Category(str, Enum):
    FOOD = "Food"
    TRANSPORT = "Transport"
    LEISURE = "Leisure"
    HEALTH = "Health"
    BILLS = "Bills"
    EDUCATION = "Education"
    CLOTHING = "Clothing"
    SERVICES = "Services"
    OTHER = "Other"


class PaymentMethod(str, Enum):
    PIX = "pix"
    CASH = "cash"
    CREDIT = "credit"
    DEBIT = "debit"
    OTHER = "other"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


# Single fallback per enumeration; callers must not repeat the literals
DEFAULT_CATEGORY = Category.OTHER
DEFAULT_PAYMENT_METHOD = PaymentMethod.OTHER


class ParseResult(BaseModel):
    payment_method: PaymentMethod = DEFAULT_PAYMENT_METHOD
    date: datetime.date
    cleaned_description: str = ""


class CategorizationResult(BaseModel):
    category: Category
    source: str # "rules" or "explicit"


class TransactionDraft(BaseModel):
    type: TransactionType
    amount: float = Field(gt=0)
    category: Category
    description: str
    date: datetime.date
    payment_method: PaymentMethod
    source: str # "web", "whatsapp"


class TransactionInput(BaseModel):
    """A form submission. Omitted fields are filled in by the service."""
    type: TransactionType
    amount: float = Field(gt=0)
    description: str = ""
    category: Optional[Category] = None
    payment_method: Optional[PaymentMethod] = None
    date: Optional[datetime.date] = None


_CHAT_TYPE_ALIASES = {
    "gasto": TransactionType.EXPENSE,
    "despesa": TransactionType.EXPENSE,
    "receita": TransactionType.INCOME,
}


class ChatMessage(BaseModel):
    """A message relayed by the chat bot. ``text`` is the raw phrase."""
    text: str
    amount: float = Field(gt=0)
    type: TransactionType = TransactionType.EXPENSE
    category: Optional[Category] = None
    payment_method: Optional[PaymentMethod] = None
    date: Optional[datetime.date] = None

    @field_validator("type", mode="before")
    @classmethod
    def translate_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _CHAT_TYPE_ALIASES.get(value.strip().lower(), value)
        return value

    @field_validator("date", mode="before")
    @classmethod
    def parse_bot_date(cls, value: Any) -> Any:
        # The bot sends DD/MM/YYYY; ISO dates go through pydantic as usual
        if isinstance(value, str) and "/" in value:
            parsed = parse_display_date(value)
            if parsed is None:
                raise ValueError(f"invalid date '{value}', expected DD/MM/YYYY")
            return parsed
        return value
