import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from core.config import settings
from core.logging_config import log_latency
from models.rag_model import AskRequest, AskResponse, ErrorResponse
from rag_services.llm import LLMService
from rag_services.news import get_live_context
from rag_services.state import get_state

logger = logging.getLogger(__name__)

router = APIRouter()

llm_service = LLMService(
    base_url=settings.LLM_BASE_URL,
    api_key=settings.LLM_API_KEY,
    model=settings.CHAT_MODEL,
    timeout=settings.LLM_TIMEOUT,
)


def simulated_answer(question: str) -> str:
    return f'Simulated AI: You asked - "{question}". Here\'s a pretend answer!'


@log_latency("ask.answer_with_context")
async def answer_with_context(question: str, state: dict) -> str:
    """
    Live news first, then the uploaded document, then the local model.
    Only reachable when ASK_MODE is "rag".
    """
    context = await asyncio.to_thread(get_live_context, question)

    vector_store = state.get("vector_store")
    if not context and vector_store is not None:
        results = await asyncio.to_thread(
            vector_store.similarity_search, question, settings.TOP_K_RESULTS
        )
        context = "\n".join(chunk.text for chunk in results)

    return await asyncio.to_thread(llm_service.generate_answer, question, context)


@router.post(
    "/ask",
    response_model=AskResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def ask(payload: Optional[AskRequest] = None, state: dict = Depends(get_state)):
    """
    Answer a question.

    Request body:
    ```json
    {
        "question": "What is in the document?"
    }
    ```

    The default mode echoes the question in a canned answer and never
    touches the vector store.
    """
    question = payload.question if payload else None
    if not question:
        raise HTTPException(status_code=400, detail="Missing question.")

    try:
        logger.info(f"Received question: {question}")

        if settings.ASK_MODE == "rag":
            answer = await answer_with_context(question, state)
        else:
            answer = simulated_answer(question)

        return AskResponse(answer=answer)

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"/api/ask error: {e}")
        raise HTTPException(status_code=500, detail=str(e))
