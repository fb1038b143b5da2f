"""City search and reverse geocoding via Nominatim."""

from __future__ import annotations

from typing import Any

from skycast.datasources.nominatim.client import (
    DEFAULT_LANGUAGE,
    NOMINATIM_API,
    PLACE_KEYS,
    REVERSE_PATH,
    SEARCH_PATH,
)
from skycast.errors import MalformedPayloadError
from skycast.schemas import Location, PlaceLabel
from skycast.services.http import session


def _place_name(address: dict[str, Any]) -> str | None:
    """First of city/town/village present in a Nominatim address."""
    for key in PLACE_KEYS:
        if address.get(key):
            return str(address[key])
    return None


def _country_code(address: dict[str, Any]) -> str:
    return str(address.get("country_code") or "").upper()


def _coordinate(match: dict[str, Any], key: str) -> float:
    try:
        return float(match[key])
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedPayloadError(f"Search result has no valid '{key}'") from exc


def search_city(
    name: str,
    *,
    language: str = DEFAULT_LANGUAGE,
    api_url: str = NOMINATIM_API,
) -> Location | None:
    """
    Resolve a free-text city name to coordinates.

    Args:
        name: City name as typed by the user.
        language: ``accept-language`` for returned names.
        api_url: Nominatim base URL.

    Returns:
        Best match, or None if nothing matched.

    Raises:
        requests.RequestException: On transport failure or non-2xx status.
        MalformedPayloadError: If the response or its first result has the
            wrong shape (e.g. no usable lat/lon).
    """
    params: dict[str, str | int] = {
        "q": name,
        "format": "json",
        "addressdetails": 1,
        "limit": 1,
        "accept-language": language,
    }
    resp = session.get(api_url + SEARCH_PATH, params=params)
    resp.raise_for_status()
    results: Any = resp.json()
    if not isinstance(results, list):
        raise MalformedPayloadError("Search response is not a list")
    if not results:
        return None

    match = results[0]
    if not isinstance(match, dict):
        raise MalformedPayloadError("Search result is not an object")
    address = match.get("address")
    if not isinstance(address, dict):
        address = {}
    return Location(
        name=_place_name(address) or name,
        country=_country_code(address),
        latitude=_coordinate(match, "lat"),
        longitude=_coordinate(match, "lon"),
    )


def reverse_lookup(
    lat: float,
    lon: float,
    *,
    language: str = DEFAULT_LANGUAGE,
    api_url: str = NOMINATIM_API,
) -> PlaceLabel:
    """
    Label coordinates with a city and country code.

    A point outside any named settlement is labeled ``"Unknown"``.

    Raises:
        requests.RequestException: On transport failure or non-2xx status.
        MalformedPayloadError: If the body is not a JSON object.
    """
    params: dict[str, str | float] = {
        "lat": lat,
        "lon": lon,
        "format": "json",
        "accept-language": language,
    }
    resp = session.get(api_url + REVERSE_PATH, params=params)
    resp.raise_for_status()
    data: Any = resp.json()
    if not isinstance(data, dict):
        raise MalformedPayloadError("Reverse lookup response is not an object")

    address = data.get("address") or {}
    if not isinstance(address, dict):
        raise MalformedPayloadError("Reverse lookup address is not an object")
    return PlaceLabel(
        city=_place_name(address) or PlaceLabel.unknown().city,
        country=_country_code(address),
    )
