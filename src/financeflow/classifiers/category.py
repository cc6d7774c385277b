from financeflow.classifiers.base import Rule, contains_any, first_match
from financeflow.domain.text import normalize
from financeflow.models import DEFAULT_CATEGORY, Category

# Ordering matters: keyword sets overlap ("manutencao" is both Transport and
# Services) and the earlier rule wins.
CATEGORY_RULES: tuple[Rule[Category], ...] = (
    Rule(contains_any(
        "mercado", "alimento", "comida", "restaurante", "lanche", "ifood",
        "supermercado", "feira", "padaria", "acougue", "hortifruti",
    ), Category.FOOD),
    Rule(contains_any(
        "gasolina", "combustivel", "uber", "taxi", "onibus", "metro", "transporte",
        "moto", "carro", "estacionamento", "posto", "manutencao", "seguro", "ipva",
    ), Category.TRANSPORT),
    Rule(contains_any(
        "netflix", "spotify", "cinema", "shopping", "lazer", "academia", "jogo",
        "festa", "bar", "show", "viagem", "hotel", "passagem",
    ), Category.LEISURE),
    Rule(contains_any(
        "farmacia", "remedio", "medico", "saude", "plano", "hospital", "consulta",
        "exame", "dentista", "oculos",
    ), Category.HEALTH),
    Rule(contains_any(
        "telefone", "celular", "internet", "conta", "agua", "luz", "energia",
        "condominio", "aluguel", "financiamento", "emprestimo",
    ), Category.BILLS),
    Rule(contains_any(
        "curso", "faculdade", "livro", "material", "escola", "universidade", "aula",
    ), Category.EDUCATION),
    Rule(contains_any(
        "roupa", "tenis", "sapato", "camisa", "calca", "loja", "moda", "vestuario",
    ), Category.CLOTHING),
    Rule(contains_any(
        "servico", "conserto", "manutencao", "reparo", "tecnico", "assistencia",
    ), Category.SERVICES),
)


def classify_category(description: str | None) -> Category:
    """Infer a spending category from free text. Never fails; unknown text is ``Other``."""
    return first_match(CATEGORY_RULES, normalize(description), DEFAULT_CATEGORY)
