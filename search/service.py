import httpx
import orjson
from typing import Any, List, Optional

from config.settings import (RADIOFM_API_BASE, COMBO_SEARCH_PATH, SEARCH_PARAM, UPSTREAM_TIMEOUT)
from search.errors import (ValidationError, TransportError, UpstreamShapeError, UpstreamApplicationError)
from search.mappers import map_radio_station, map_podcast
from search.models import (Bucket, RawPodcast, RawStation, SearchResult, UpstreamPayload)

RADIO_BUCKET = "radio"
PODCAST_BUCKET = "podcast"


def validate_query(query: Optional[str]) -> str:
    """Trims the incoming query; blank or missing input is rejected."""
    trimmed = (query or "").strip()
    if not trimmed:
        raise ValidationError()
    return trimmed


async def fetch_combo_search(client: httpx.AsyncClient, query: str) -> Any:
    """
    Calls RadioFM's combined search once and returns the decoded body,
    or None when the body is empty or not JSON.
    """
    try:
        response = await client.get(
            f"{RADIOFM_API_BASE}{COMBO_SEARCH_PATH}",
            params={SEARCH_PARAM: query},
            timeout=UPSTREAM_TIMEOUT,
        )
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise TransportError(detail=f"{type(e).__name__}: {e}") from e

    if not response.content:
        return None
    try:
        return orjson.loads(response.content)
    except orjson.JSONDecodeError:
        return None


def interpret_envelope(body: Any) -> List[Any]:
    """
    Checks the RadioFM envelope and returns its bucket list.
    Expected shape: {"data": {"ErrorCode": 0, "ErrorMessage": ..., "Data": [...]}}
    """
    if not isinstance(body, dict) or not isinstance(body.get("data"), dict):
        raise UpstreamShapeError(detail=f"body: {str(body)[:200]}")

    payload = UpstreamPayload.model_validate(body["data"])

    # Anything but a numeric zero ErrorCode is a failure, a missing code included
    if isinstance(payload.error_code, bool) or payload.error_code != 0:
        message = str(payload.error_message) if payload.error_message else None
        raise UpstreamApplicationError(
            message,
            detail=f"ErrorCode={payload.error_code!r} ErrorMessage={payload.error_message!r}",
        )

    # Empty or missing Data means no buckets; any other non-list is malformed
    if not payload.buckets:
        return []
    if not isinstance(payload.buckets, list):
        raise UpstreamShapeError(detail=f"Data: {str(payload.buckets)[:200]}")
    return payload.buckets


def find_bucket(buckets: List[Any], label: str) -> Optional[Bucket]:
    """First bucket whose type equals the label, None when there is none."""
    for entry in buckets:
        if isinstance(entry, dict) and entry.get("type") == label:
            return Bucket.model_validate(entry)
    return None


def bucket_items(bucket: Optional[Bucket]) -> List[dict]:
    if bucket is None or not isinstance(bucket.data, list):
        return []
    items = [item for item in bucket.data if isinstance(item, dict)]
    skipped = len(bucket.data) - len(items)
    if skipped:
        print(f"⚠️ Skipped {skipped} non-object item(s) in '{bucket.type}' bucket.")
    return items


async def search_radiofm(client: httpx.AsyncClient, query: Optional[str]) -> SearchResult:
    """
    Runs the whole search: validate, call RadioFM, interpret the envelope,
    split the buckets and normalize both collections.
    Raises a SearchError subclass on any failure.
    """
    trimmed = validate_query(query)

    body = await fetch_combo_search(client, trimmed)
    buckets = interpret_envelope(body)

    radio_bucket = find_bucket(buckets, RADIO_BUCKET)
    podcast_bucket = find_bucket(buckets, PODCAST_BUCKET)

    stations = [map_radio_station(RawStation.model_validate(item)) for item in bucket_items(radio_bucket)]
    podcasts = [map_podcast(RawPodcast.model_validate(item)) for item in bucket_items(podcast_bucket)]

    return SearchResult(
        query=trimmed,
        total_stations=len(stations),
        total_podcasts=len(podcasts),
        stations=stations,
        podcasts=podcasts,
    )
