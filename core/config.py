from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List, Optional


class Settings(BaseSettings):
    app_name: str = "PDF Ask Demo API"
    environment: str = Field(default="development")

    # Server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000)
    log_level: str = Field(default="INFO")

    # CORS
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    # File Upload Settings
    UPLOAD_DIR: str = "uploads"

    # RAG Settings
    CHUNK_SIZE: int = 1000
    CHUNK_OVERLAP: int = 200
    TOP_K_RESULTS: int = 3

    # Placeholder embeddings
    EMBEDDING_DIMENSIONS: int = 1536
    EMBEDDING_FILL_VALUE: float = 0.1

    # "simulated" keeps the canned answer, "rag" enables the retrieval path
    ASK_MODE: str = "simulated"

    # Live news context (RapidAPI)
    RAPIDAPI_KEY: Optional[str] = None
    RAPIDAPI_HOST: str = "real-time-news-data.p.rapidapi.com"
    NEWS_LIMIT: int = 5
    NEWS_COUNTRY: str = "US"
    NEWS_LANG: str = "en"
    NEWS_TIMEOUT: float = 10.0
    LIVE_CONTEXT_MAX_CHARS: int = 2000

    # Local LLM Settings (Ollama, OpenAI-compatible endpoint)
    LLM_BASE_URL: str = "http://localhost:11434/v1"
    LLM_API_KEY: str = "ollama"
    CHAT_MODEL: str = "llama3"
    LLM_TIMEOUT: float = 20.0

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


settings = Settings()
