"""Random quote proxy with a single fallback upstream"""
from typing import Optional
import logging

import httpx
from pydantic import ValidationError

from blogapi.core.config import settings
from blogapi.modules.quotes.schemas.quote import Quote, PrimaryQuote, FallbackQuote

logger = logging.getLogger("blogapi")


class QuoteUnavailableError(Exception):
    """Raised when neither upstream produced a usable quote"""


async def _fetch_primary(client: httpx.AsyncClient, url: str) -> Quote:
    response = await client.get(url)
    response.raise_for_status()
    data = PrimaryQuote.model_validate(response.json())
    return Quote(content=data.content, author=data.author)


async def _fetch_fallback(client: httpx.AsyncClient, url: str) -> Quote:
    response = await client.get(url)
    response.raise_for_status()
    payload = response.json()
    # zenquotes answers with a one-element list
    if isinstance(payload, list):
        if not payload:
            raise ValueError("Fallback API returned an empty list")
        payload = payload[0]
    return FallbackQuote.model_validate(payload).to_quote()


async def fetch_quote(
    client: httpx.AsyncClient,
    primary_url: Optional[str] = None,
    fallback_url: Optional[str] = None,
) -> Quote:
    primary_url = primary_url or settings.QUOTE_PRIMARY_URL
    fallback_url = fallback_url or settings.QUOTE_FALLBACK_URL

    try:
        return await _fetch_primary(client, primary_url)
    except (httpx.HTTPError, ValueError, ValidationError) as primary_error:
        logger.error(f"Error fetching from primary API: {primary_error}")

    try:
        return await _fetch_fallback(client, fallback_url)
    except (httpx.HTTPError, ValueError, ValidationError) as fallback_error:
        logger.error(f"Error fetching from fallback API: {fallback_error}")
        raise QuoteUnavailableError("Failed to fetch quote") from fallback_error
