"""
In-memory vector store backed by a flat FAISS index
"""
from dataclasses import dataclass
from typing import List

import faiss
import numpy as np


@dataclass(frozen=True)
class DocumentChunk:
    text: str
    page: int
    index: int


class VectorStore:
    """Holds the chunks of one uploaded document and their vectors."""

    def __init__(self, chunks: List[DocumentChunk], embedding_service):
        if not chunks:
            raise ValueError("No text chunks to index")

        self.chunks = chunks
        self.embedding_service = embedding_service
        self.dense_index = None
        self._build_index()

    def _build_index(self):
        embeddings = self.embedding_service.embed_documents([c.text for c in self.chunks])
        if len(embeddings) != len(self.chunks):
            raise ValueError(
                f"Got {len(embeddings)} vectors for {len(self.chunks)} chunks"
            )

        emb_np = np.array(embeddings).astype("float32")
        dim = emb_np.shape[1]

        self.dense_index = faiss.IndexFlatL2(dim)
        self.dense_index.add(emb_np)

    @property
    def count(self) -> int:
        return int(self.dense_index.ntotal)

    def similarity_search(self, query: str, k: int = 3) -> List[DocumentChunk]:
        """Nearest chunks to the query vector, closest first."""
        k = min(k, self.count)
        if k <= 0:
            return []

        q_emb = np.array([self.embedding_service.embed_query(query)], dtype="float32")
        _, indices = self.dense_index.search(q_emb, k)

        return [self.chunks[int(i)] for i in indices[0] if i >= 0]
