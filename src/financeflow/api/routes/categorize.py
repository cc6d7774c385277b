from typing import Annotated, Any

from fastapi import APIRouter, Depends

from financeflow.api.dependencies import get_service
from financeflow.api.schemas import CategorizeRequest, ParsedMessage, ParseRequest
from financeflow.manager import CategorizerService
from financeflow.models import CategorizationResult

router = APIRouter(prefix="/api")


@router.post("/categorize", response_model=CategorizationResult)
async def categorize_description(
    req: CategorizeRequest,
    service: Annotated[CategorizerService, Depends(get_service)],
) -> CategorizationResult:
    return service.categorize(req.description, req.category)


@router.post("/parse", response_model=ParsedMessage)
async def parse_message(
    req: ParseRequest,
    service: Annotated[CategorizerService, Depends(get_service)],
) -> ParsedMessage:
    parsed = service.parse(req.text)
    category = service.categorize(parsed.cleaned_description).category
    return ParsedMessage(**parsed.model_dump(), category=category)


@router.get("/catalog")
async def get_catalog(
    service: Annotated[CategorizerService, Depends(get_service)],
) -> dict[str, list[dict[str, Any]]]:
    return service.catalog()
