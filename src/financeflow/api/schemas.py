from pydantic import BaseModel

from financeflow.models import Category, ParseResult


class CategorizeRequest(BaseModel):
    description: str | None = None
    category: Category | None = None


class ParseRequest(BaseModel):
    text: str | None = None


class ParsedMessage(ParseResult):
    category: Category
