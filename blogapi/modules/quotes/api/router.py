from typing import Any

import httpx
from fastapi import APIRouter, Depends, HTTPException, status

from blogapi.deps import get_http_client
from blogapi.modules.quotes.schemas.quote import Quote
from blogapi.modules.quotes.services.quote import fetch_quote, QuoteUnavailableError

router = APIRouter()

@router.get("/quote", response_model=Quote)
async def read_random_quote(
    client: httpx.AsyncClient = Depends(get_http_client),
) -> Any:
    """Get a random quote from the primary upstream, or the fallback one"""
    try:
        return await fetch_quote(client)
    except QuoteUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
