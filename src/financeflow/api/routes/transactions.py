from typing import Annotated

from fastapi import APIRouter, Depends

from financeflow.api.dependencies import get_service
from financeflow.manager import CategorizerService
from financeflow.models import TransactionDraft, TransactionInput

router = APIRouter(prefix="/api/transactions")


@router.post("/draft", response_model=TransactionDraft)
async def draft_transaction(
    data: TransactionInput,
    service: Annotated[CategorizerService, Depends(get_service)],
) -> TransactionDraft:
    """Complete a form submission; persisting the draft is up to the caller."""
    return service.build_draft(data)
