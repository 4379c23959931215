from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from typing import Optional
import httpx

from search.errors import SearchError, TransportError
from search.models import ErrorResponse, SearchResult
from search.service import search_radiofm
from upstream.client import get_http_client


# Use APIRouter to group the plugin search endpoint
router = APIRouter(
    tags=["Search"],
)


@router.get(
    "/search",
    response_model=SearchResult,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def search(
        query: Optional[str] = Query(None, description="Free-text station or podcast search."),
        client: httpx.AsyncClient = Depends(get_http_client),
):
    """
    ChatGPT calls this with ?query=...
    The query is proxied to RadioFM's combined search and the result is
    split into normalized stations and podcasts.
    """
    try:
        return await search_radiofm(client, query)

    except SearchError as e:
        print(f"❌ Search error ({type(e).__name__}): {e.message}" + (f" | {e.detail}" if e.detail else ""))
        return JSONResponse(status_code=e.status_code, content={"error": e.message})

    except Exception as e:
        print(f"❌ Search error: {e}")
        return JSONResponse(status_code=500, content={"error": TransportError.default_message})
