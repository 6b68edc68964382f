"""
LLM service for answer generation against a local model
"""
from typing import Optional

from openai import OpenAI

NO_ANSWER = "No valid answer."


class LLMService:
    """Handles answer generation through an OpenAI-compatible chat endpoint (Ollama by default)."""

    def __init__(self, base_url: str, api_key: str, model: str = "llama3", timeout: float = 20.0):
        # Delay client construction until first use so importing this module
        # never needs a reachable model server.
        self._client = None
        self.base_url = base_url
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    def _ensure_client(self):
        if self._client is None:
            self._client = OpenAI(base_url=self.base_url, api_key=self.api_key, timeout=self.timeout)
        return self._client

    def generate_answer(self, question: str, context: Optional[str]) -> str:
        """Generate an answer, grounding it in the context when there is one."""
        client = self._ensure_client()
        response = client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": self.build_prompt(question, context)}],
        )

        content = response.choices[0].message.content if response.choices else None
        return content or NO_ANSWER

    @staticmethod
    def build_prompt(question: str, context: Optional[str]) -> str:
        if not context:
            return question
        return f"Answer the question using the context below:\n\n{context}\n\nQuestion: {question}"
