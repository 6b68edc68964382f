from fastapi import APIRouter, Depends

from models.rag_model import HealthResponse
from rag_services.state import get_state

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(state: dict = Depends(get_state)):
    vector_store = state.get("vector_store")
    return HealthResponse(
        status="ok",
        has_document=vector_store is not None,
        chunks_count=vector_store.count if vector_store is not None else 0,
        filename=state.get("filename"),
    )
