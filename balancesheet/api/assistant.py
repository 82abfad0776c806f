import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool

from balancesheet.core.security import CurrentUser, get_current_user
from balancesheet.database import get_session
from balancesheet.schemas.assistant import AssistRequest, AssistResponse, ChatRequest, ChatResponse
from balancesheet.services.advice import generate_financial_advice
from balancesheet.services.llm import LLMServiceError, request_completion
from balancesheet.services.summary import build_financial_context, load_financial_data

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/assist", response_model=AssistResponse)
def assist(
    payload: AssistRequest,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    data = load_financial_data(session, current_user.id)
    return AssistResponse(advice=generate_financial_advice(payload.query, data))


@router.post("/chat", response_model=ChatResponse)
async def chat(
    payload: ChatRequest,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    data = await run_in_threadpool(load_financial_data, session, current_user.id)
    try:
        reply = await request_completion(payload.message, build_financial_context(data))
    except LLMServiceError as exc:
        logger.error("AI chat error for user %s: %s", current_user.id, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to generate AI response", "success": False},
        )
    return ChatResponse(response=reply)
