import math
import re
from typing import Any, Optional

from config.settings import LISTEN_URL_BASE
from search.models import Podcast, RawPodcast, RawStation, Station

# RadioFM marks an unknown broadcast frequency with this value
UNKNOWN_FREQUENCY = "~"

_LEADING_INT = re.compile(r'^\s*([+-]?[0-9]+)')


def parse_count(value: Any) -> int:
    """
    Reads a RadioFM counter (sent as a string or a number) as a base-10 int.
    Missing, empty or non-numeric values count as 0. Strings are read up to
    the first non-digit, so "12abc" gives 12.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return int(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    return int(match.group(1))


def normalize_frequency(value: Any) -> Optional[Any]:
    if value == UNKNOWN_FREQUENCY:
        return None
    return value


def build_listen_url(short_url: Any) -> str:
    if short_url is None:
        return LISTEN_URL_BASE
    return f"{LISTEN_URL_BASE}{short_url}"


def map_radio_station(raw: RawStation) -> Station:
    """Map a raw RadioFM station to the plugin station schema."""
    return Station(
        id=raw.st_id,
        name=raw.st_name,
        logo=raw.st_logo,
        website=raw.st_weburl,
        short_url=raw.st_shorturl,
        genre=raw.st_genre,
        language_code=raw.st_lang,
        language=raw.language,
        frequency=normalize_frequency(raw.st_bc_freq),
        city=raw.st_city,
        state=raw.st_state,
        country_name=raw.country_name_rs,
        country_code=raw.st_country,
        play_count=parse_count(raw.st_play_cnt),
        favorite_count=parse_count(raw.st_fav_cnt),
        stream_url=raw.stream_link,
        stream_type=raw.stream_type,
        stream_bitrate=raw.stream_bitrate,
        deeplink=raw.deeplink,
        listen_url=build_listen_url(raw.st_shorturl),
    )


def map_podcast(raw: RawPodcast) -> Podcast:
    """Map a raw RadioFM podcast to the plugin podcast schema."""
    return Podcast(
        id=raw.p_id,
        name=raw.p_name,
        description=raw.p_desc,
        language=raw.p_lang,
        image=raw.p_image,
        email=raw.p_email,
        category=raw.cat_name,
        total_stream=parse_count(raw.total_stream),
        deeplink=raw.deeplink,
        country_code=raw.cc_code,
    )
