from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Literal

from financeflow.classifiers.payment import detect_payment_method
from financeflow.domain.dates import parse_date_token
from financeflow.models import DEFAULT_PAYMENT_METHOD, ParseResult, PaymentMethod

TokenKind = Literal["payment", "date", "none"]


@dataclass(frozen=True)
class TokenAnnotation:
    token: str
    kind: TokenKind
    value: PaymentMethod | date | None = None

    @property
    def consumed(self) -> bool:
        return self.kind != "none"


def annotate_tokens(tokens: list[str], today: date) -> list[TokenAnnotation]:
    """
    Label each token as a payment method, a date or plain description.

    Tokens are scanned right to left because metadata tends to be appended
    after the subject ("uber ontem pix"). Only the first payment token and
    the first date token found are consumed; later candidates of the same
    kind stay in the description. The payment check runs before the date
    check on every token.
    """
    annotations: list[TokenAnnotation] = []
    payment_found = False
    date_found = False

    for token in reversed(tokens):
        annotation = TokenAnnotation(token=token, kind="none")

        if not payment_found:
            method = detect_payment_method(token)
            if method != DEFAULT_PAYMENT_METHOD:
                annotation = TokenAnnotation(token=token, kind="payment", value=method)
                payment_found = True

        if not annotation.consumed and not date_found:
            parsed = parse_date_token(token, today)
            if parsed is not None:
                annotation = TokenAnnotation(token=token, kind="date", value=parsed)
                date_found = True

        annotations.append(annotation)

    annotations.reverse()
    return annotations


def extract_payment_and_date(text: str | None, today: date | None = None) -> ParseResult:
    """
    Pull an embedded payment method and date out of a free-text phrase.

    ``"mercado 15/03/2024 credito"`` gives credit, 2024-03-15 and the
    cleaned description ``"mercado"``. Missing pieces fall back to
    ``other`` and ``today``.
    """
    reference = today or date.today()
    tokens = (text or "").split()
    if not tokens:
        return ParseResult(payment_method=DEFAULT_PAYMENT_METHOD, date=reference, cleaned_description="")

    annotations = annotate_tokens(tokens, reference)

    payment_method = DEFAULT_PAYMENT_METHOD
    found_date = reference
    for annotation in annotations:
        if annotation.kind == "payment":
            payment_method = annotation.value
        elif annotation.kind == "date":
            found_date = annotation.value

    cleaned = " ".join(a.token for a in annotations if not a.consumed).strip()
    return ParseResult(payment_method=payment_method, date=found_date, cleaned_description=cleaned)
