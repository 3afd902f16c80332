"""
Chat Router - AI career coach grounded in the user's latest resume analysis
"""
import logging

from fastapi import APIRouter, Depends, HTTPException

from ..schemas.resume import ChatRequest, ChatResponse
from ..services.analysis_store import AnalysisStore, get_analysis_store
from ..services.gemini import GeminiModel, get_model_client
from ..services.prompts import build_chat_prompt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["Chat"])


@router.post("", response_model=ChatResponse)
async def chat_with_coach(
    data: ChatRequest,
    model: GeminiModel = Depends(get_model_client),
    store: AnalysisStore = Depends(get_analysis_store)
):
    """Reply to a chat message. The model's reply is returned as-is."""
    if not data.userId or not data.message:
        raise HTTPException(status_code=400, detail="userId and message are required")

    try:
        analysis = await store.get_analysis(data.userId)
        reply = await model.generate(build_chat_prompt(data.message, analysis))
        return {"reply": reply}
    except Exception:
        logger.exception(f"Gemini chat error for user {data.userId}")
        raise HTTPException(status_code=500, detail="Failed to get Gemini response")
