"""
PDF text extraction and chunking
"""
from pathlib import Path
from typing import List, Union

from pypdf import PdfReader
from langchain_text_splitters import RecursiveCharacterTextSplitter

from rag_services.retrieval import DocumentChunk


class PDFProcessor:
    """Handles PDF text extraction and chunking."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200):
        if chunk_overlap >= chunk_size:
            raise ValueError("overlap must be smaller than chunk_size")

        self.splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
        )

    @staticmethod
    def extract_pages(pdf_path: Union[str, Path]) -> List[str]:
        """Extract the text of every page, in page order."""
        reader = PdfReader(str(pdf_path))
        return [page.extract_text() or "" for page in reader.pages]

    def create_chunks(self, pages: List[str]) -> List[DocumentChunk]:
        chunks: List[DocumentChunk] = []
        for page_number, page_text in enumerate(pages, start=1):
            if not page_text.strip():
                continue
            for text in self.splitter.split_text(page_text):
                chunks.append(DocumentChunk(text=text, page=page_number, index=len(chunks)))
        return chunks

    def process(self, pdf_path: Union[str, Path]) -> List[DocumentChunk]:
        return self.create_chunks(self.extract_pages(pdf_path))
