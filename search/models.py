# search/models.py
from pydantic import BaseModel, Field
from typing import Any, List


# --- Raw RadioFM shapes ---
# Every upstream field is optional and untyped; values are read as-is and
# the mappers decide how to default or parse them.

class RawStation(BaseModel):
    """A single item of the "radio" bucket, keyed by RadioFM field names."""
    st_id: Any = None
    st_name: Any = None
    st_logo: Any = None
    st_weburl: Any = None
    st_shorturl: Any = None
    st_genre: Any = None
    st_lang: Any = None
    language: Any = None
    st_bc_freq: Any = None
    st_city: Any = None
    st_state: Any = None
    country_name_rs: Any = None
    st_country: Any = None
    st_play_cnt: Any = None
    st_fav_cnt: Any = None
    stream_link: Any = None
    stream_type: Any = None
    stream_bitrate: Any = None
    deeplink: Any = None


class RawPodcast(BaseModel):
    """A single item of the "podcast" bucket."""
    p_id: Any = None
    p_name: Any = None
    p_desc: Any = None
    p_lang: Any = None
    p_image: Any = None
    p_email: Any = None
    cat_name: Any = None
    total_stream: Any = None
    deeplink: Any = None
    cc_code: Any = None


class Bucket(BaseModel):
    # 'data' is kept loose: anything other than a list is treated as no items
    type: Any = None
    data: Any = None


class UpstreamPayload(BaseModel):
    error_code: Any = Field(None, alias="ErrorCode")
    error_message: Any = Field(None, alias="ErrorMessage")
    buckets: Any = Field(None, alias="Data")

    class Config:
        populate_by_name = True


# --- Public plugin schema ---

class Station(BaseModel):
    """
    Normalized radio station as returned to the plugin caller.
    Field names are snake_case in Python and camelCase on the wire.
    """
    id: Any = None
    name: Any = None
    logo: Any = None
    website: Any = None
    short_url: Any = Field(None, alias="shortUrl")
    genre: Any = None
    language_code: Any = Field(None, alias="languageCode")
    language: Any = None

    # None when RadioFM reports the "~" (unknown) sentinel
    frequency: Any = None

    city: Any = None
    state: Any = None
    country_name: Any = Field(None, alias="countryName")
    country_code: Any = Field(None, alias="countryCode")
    play_count: int = Field(0, alias="playCount")
    favorite_count: int = Field(0, alias="favoriteCount")
    stream_url: Any = Field(None, alias="streamUrl")
    stream_type: Any = Field(None, alias="streamType")
    stream_bitrate: Any = Field(None, alias="streamBitrate")
    deeplink: Any = None
    listen_url: str = Field(..., alias="listenUrl")

    class Config:
        populate_by_name = True


class Podcast(BaseModel):
    id: Any = None
    name: Any = None
    description: Any = None
    language: Any = None
    image: Any = None
    email: Any = None
    category: Any = None
    total_stream: int = Field(0, alias="totalStream")
    deeplink: Any = None
    country_code: Any = Field(None, alias="countryCode")

    class Config:
        populate_by_name = True


class SearchResult(BaseModel):
    query: str
    total_stations: int = Field(..., alias="totalStations")
    total_podcasts: int = Field(..., alias="totalPodcasts")
    stations: List[Station] = []
    podcasts: List[Podcast] = []

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    error: str


class HealthStatus(BaseModel):
    status: str
    version: str
    docs: str
