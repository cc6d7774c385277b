from datetime import date

from financeflow.models import Category, PaymentMethod

PAYMENT_METHOD_LABELS: dict[PaymentMethod, str] = {
    PaymentMethod.PIX: "📱 PIX",
    PaymentMethod.CASH: "💵 Dinheiro",
    PaymentMethod.CREDIT: "💳 Crédito",
    PaymentMethod.DEBIT: "🏦 Débito",
    PaymentMethod.OTHER: "📄 Outro",
}

CATEGORY_ICONS: dict[Category, str] = {
    Category.FOOD: "🍔",
    Category.TRANSPORT: "🚗",
    Category.LEISURE: "🎬",
    Category.HEALTH: "🏥",
    Category.BILLS: "💡",
    Category.EDUCATION: "📚",
    Category.CLOTHING: "👕",
    Category.SERVICES: "🔧",
    Category.OTHER: "📦",
}

UNKNOWN_ICON = "📌"


def format_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def format_currency(amount: float) -> str:
    """Format as Brazilian reais, e.g. ``R$ 1.234,56``."""
    grouped = f"{abs(amount):,.2f}"
    # Swap separators to the pt-BR convention
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if amount < 0 else ""
    return f"{sign}R$ {localized}"


def format_payment_method(method: PaymentMethod | str) -> str:
    try:
        return PAYMENT_METHOD_LABELS[PaymentMethod(method)]
    except ValueError:
        return str(method)


def category_icon(category: Category | str) -> str:
    try:
        return CATEGORY_ICONS[Category(category)]
    except ValueError:
        return UNKNOWN_ICON
