"""
Placeholder embedding service.

Every text maps to the same constant vector, so similarity search over
these vectors carries no signal. It exists so the indexing pipeline can
run without an embedding model or API key.
"""
from typing import List


class PlaceholderEmbeddings:
    """Returns a fixed-length vector of a constant value for any input."""

    model_name = "fake"

    def __init__(self, dimensions: int = 1536, fill_value: float = 0.1):
        if dimensions <= 0:
            raise ValueError("dimensions must be positive")
        self.dimensions = dimensions
        self.fill_value = fill_value

    def embed_query(self, text: str) -> List[float]:
        return [self.fill_value] * self.dimensions

    def embed_documents(self, texts: List[str]) -> List[List[float]]:
        return [self.embed_query(text) for text in texts]
