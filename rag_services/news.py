"""
Live news context lookup through the RapidAPI real-time news search.
"""
import logging
from typing import Optional

import requests

from core.config import settings

logger = logging.getLogger(__name__)


def get_live_context(query: str) -> Optional[str]:
    """Return recent article snippets for the query, or None if unavailable."""
    if not settings.RAPIDAPI_KEY:
        logger.info("RAPIDAPI_KEY not set, skipping live news lookup")
        return None

    try:
        response = requests.get(
            f"https://{settings.RAPIDAPI_HOST}/search-news",
            params={
                "query": query,
                "limit": settings.NEWS_LIMIT,
                "country": settings.NEWS_COUNTRY,
                "lang": settings.NEWS_LANG,
            },
            headers={
                "x-rapidapi-key": settings.RAPIDAPI_KEY,
                "x-rapidapi-host": settings.RAPIDAPI_HOST,
            },
            timeout=settings.NEWS_TIMEOUT,
        )
        response.raise_for_status()
        payload = response.json()

        articles = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(articles, list):
            raise ValueError(f"unexpected news payload: {type(articles).__name__} data")

        snippets = "\n\n".join(
            f"{article.get('title', '')}\n{article.get('text', '')}" for article in articles
        )
    except (requests.RequestException, ValueError, AttributeError, TypeError) as e:
        logger.error(f"Live news error: {e}")
        return None

    return snippets[:settings.LIVE_CONTEXT_MAX_CHARS] or None
