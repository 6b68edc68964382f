import asyncio
import logging
import tempfile
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, File, UploadFile

from core.config import settings
from core.logging_config import log_latency
from models.rag_model import ErrorResponse, UploadResponse
from rag_services.embeddings import PlaceholderEmbeddings
from rag_services.pdf_processor import PDFProcessor
from rag_services.retrieval import VectorStore
from rag_services.state import get_state

logger = logging.getLogger(__name__)

router = APIRouter()

# =========================
# RAG Services
# =========================
pdf_processor = PDFProcessor(settings.CHUNK_SIZE, settings.CHUNK_OVERLAP)
embedding_service = PlaceholderEmbeddings(
    settings.EMBEDDING_DIMENSIONS,
    settings.EMBEDDING_FILL_VALUE,
)

UPLOAD_SUCCESS = "PDF uploaded and embedded successfully."


def get_upload_dir() -> Path:
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    return upload_dir


@log_latency("upload.build_vector_store")
def build_vector_store(pdf_path: Path) -> VectorStore:
    chunks = pdf_processor.process(pdf_path)
    logger.info(
        f"Split {pdf_path.name} into {len(chunks)} chunks, embedding with {embedding_service.model_name}"
    )
    return VectorStore(chunks, embedding_service)


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_pdf(
    file: Optional[UploadFile] = File(None),
    state: dict = Depends(get_state),
):
    """
    Upload a PDF, split it into chunks and index them.

    The new index replaces whatever the previous upload built.
    """
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded.")

    temp_path = None
    try:
        pdf_bytes = await file.read()

        with tempfile.NamedTemporaryFile(dir=get_upload_dir(), suffix=".pdf", delete=False) as f:
            temp_path = Path(f.name)
            f.write(pdf_bytes)

        logger.info(f"Uploaded PDF: {file.filename} -> {temp_path.resolve()}")

        vector_store = await asyncio.to_thread(build_vector_store, temp_path)

        state.update({
            "vector_store": vector_store,
            "filename": file.filename,
        })

        return UploadResponse(
            status=UPLOAD_SUCCESS,
            chunks_count=vector_store.count,
            filename=file.filename,
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"/api/upload error: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    finally:
        if temp_path is not None and temp_path.exists():
            temp_path.unlink()
