from typing import AsyncIterator, Optional

import httpx

from config.settings import RADIOFM_API_BASE, UPSTREAM_TIMEOUT

# Global variable to hold the shared client instance
client: Optional[httpx.AsyncClient] = None


async def open_upstream_client():
    """Creates the pooled HTTP client used for RadioFM calls."""
    global client
    if client is not None:
        return
    print(f"Opening upstream client for {RADIOFM_API_BASE}...")
    client = httpx.AsyncClient(timeout=UPSTREAM_TIMEOUT)


async def close_upstream_client():
    """Closes the pooled client when the application shuts down."""
    global client
    if client is not None:
        print("Closing upstream client.")
        await client.aclose()
        client = None


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """
    Request dependency handing out the shared client. When the app was not
    started through its lifespan a short-lived client serves the request.
    """
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=UPSTREAM_TIMEOUT) as temp_client:
        yield temp_client
