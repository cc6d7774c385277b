from datetime import datetime
from typing import Annotated, Any

from fastapi import APIRouter, Depends

from financeflow.api.dependencies import get_service
from financeflow.logger import get_logger
from financeflow.manager import CategorizerService
from financeflow.models import ChatMessage, TransactionDraft

logger = get_logger(__name__)

router = APIRouter(prefix="/api/whatsapp")


@router.post("/draft", response_model=TransactionDraft)
async def draft_from_message(
    message: ChatMessage,
    service: Annotated[CategorizerService, Depends(get_service)],
) -> TransactionDraft:
    logger.info("[WHATSAPP] Message received: '%s' (%.2f)", message.text[:50], message.amount)
    return service.build_chat_draft(message)


@router.get("/status")
async def whatsapp_status() -> dict[str, Any]:
    return {
        "whatsapp_bot": "integrated",
        "status": "ready",
        "last_update": datetime.now().isoformat(),
        "endpoints": {
            "post": "/api/whatsapp/draft",
            "get": "/api/whatsapp/status",
        },
    }
