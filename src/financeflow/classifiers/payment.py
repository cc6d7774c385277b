from financeflow.classifiers.base import Rule, first_match, whole_word
from financeflow.domain.text import normalize
from financeflow.models import DEFAULT_PAYMENT_METHOD, PaymentMethod

PAYMENT_RULES: tuple[Rule[PaymentMethod], ...] = (
    Rule(whole_word("pix"), PaymentMethod.PIX),
    Rule(whole_word("dinheiro"), PaymentMethod.CASH),
    Rule(whole_word("credito"), PaymentMethod.CREDIT),
    Rule(whole_word("debito"), PaymentMethod.DEBIT),
    # A bare "cartao" does not say which card, assume credit
    Rule(whole_word("cartao"), PaymentMethod.CREDIT),
    # Bank transfers have no tag of their own
    Rule(whole_word("transferencia", "ted"), PaymentMethod.PIX),
)


def detect_payment_method(word: str | None) -> PaymentMethod:
    """
    Map a single token to a payment method.

    Matching is stricter than category classification: the keyword has to be
    a whole whitespace-delimited word, so "pixar" is ``other``.
    """
    return first_match(PAYMENT_RULES, normalize(word), DEFAULT_PAYMENT_METHOD)
