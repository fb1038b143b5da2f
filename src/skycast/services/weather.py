"""
Weather service: location lookup + forecast fetch + normalization.

Uses Open-Meteo for weather and Nominatim for geocoding (both free, no API
key). This is the only place where transport failures are translated into
``skycast.errors``; nothing here retries.

Example:
    from skycast.services.weather import WeatherService
    report = WeatherService.from_settings().fetch_by_city_name("Kazan")
    print(report.current.temp, report.current.description)
"""

from __future__ import annotations

import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Protocol

import requests
import structlog

from skycast.config import Settings, get_settings
from skycast.datasources import nominatim, openmeteo
from skycast.errors import (
    MalformedPayloadError,
    NoConnectionError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    WeatherError,
)
from skycast.normalize import aggregate_forecast, build_current_conditions
from skycast.schemas import PlaceLabel, Units, WeatherReport

if TYPE_CHECKING:
    from skycast.schemas import Location

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------


class ForecastSource(Protocol):
    """Anything that returns a raw Open-Meteo style forecast payload."""

    def fetch(self, lat: float, lon: float, units: Units) -> dict[str, Any]: ...


class LocationResolver(Protocol):
    """City search and reverse geocoding."""

    def resolve(self, name: str) -> Location | None: ...

    def reverse_resolve(self, lat: float, lon: float) -> PlaceLabel: ...


class OpenMeteoSource:
    """ForecastSource backed by the Open-Meteo Forecast API."""

    def __init__(
        self,
        api_url: str = openmeteo.OPEN_METEO_API,
        forecast_days: int = openmeteo.DEFAULT_FORECAST_DAYS,
    ) -> None:
        self.api_url = api_url
        self.forecast_days = forecast_days

    def fetch(self, lat: float, lon: float, units: Units) -> dict[str, Any]:
        return openmeteo.fetch_forecast(
            lat, lon, units, forecast_days=self.forecast_days, api_url=self.api_url
        )


class NominatimResolver:
    """LocationResolver backed by OpenStreetMap Nominatim."""

    def __init__(self, api_url: str = nominatim.NOMINATIM_API, language: str = "en") -> None:
        self.api_url = api_url
        self.language = language

    def resolve(self, name: str) -> Location | None:
        return nominatim.search_city(name, language=self.language, api_url=self.api_url)

    def reverse_resolve(self, lat: float, lon: float) -> PlaceLabel:
        return nominatim.reverse_lookup(lat, lon, language=self.language, api_url=self.api_url)


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------


def translate_transport_error(exc: requests.RequestException) -> WeatherError:
    """Map a ``requests`` failure onto the service error taxonomy.

    HTTP 404 -> not found, 429 -> rate limited, any other status -> server
    error; connection failures and timeouts -> no connection; an
    undecodable body -> malformed payload.
    """
    if isinstance(exc, requests.JSONDecodeError):
        return MalformedPayloadError("Weather provider returned invalid JSON")
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        status = exc.response.status_code
        if status == 404:
            return NotFoundError("Data not found")
        if status == 429:
            return RateLimitedError()
        return ServerError(f"Weather server error (HTTP {status})")
    if isinstance(exc, requests.ConnectionError | requests.Timeout):
        return NoConnectionError()
    return ServerError(str(exc) or None)


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------


class WeatherService:
    """Fetch and normalize current conditions plus a 5-day forecast."""

    def __init__(
        self,
        source: ForecastSource | None = None,
        resolver: LocationResolver | None = None,
    ) -> None:
        self.source: ForecastSource = source or OpenMeteoSource()
        self.resolver: LocationResolver = resolver or NominatimResolver()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> WeatherService:
        """Build a service wired to the endpoints in ``Settings``."""
        settings = settings or get_settings()
        return cls(
            source=OpenMeteoSource(settings.open_meteo_url, settings.forecast_days),
            resolver=NominatimResolver(settings.nominatim_url, settings.accept_language),
        )

    def fetch_by_coordinates(
        self,
        lat: float,
        lon: float,
        units: Units = Units.METRIC,
        now: datetime | None = None,
    ) -> WeatherReport:
        """
        Current conditions and forecast for a point.

        Args:
            lat: Latitude.
            lon: Longitude.
            units: Metric or imperial.
            now: Reference instant, naive, in the point's local time. Defaults
                to the wall clock shifted by the provider's UTC offset.

        Raises:
            WeatherError: One of its subclasses; see ``skycast.errors``.
        """
        start_time = time.perf_counter()
        try:
            payload = self.source.fetch(lat, lon, units)
        except requests.RequestException as exc:
            error = translate_transport_error(exc)
            logger.warning(
                "forecast_fetch_failed",
                lat=lat,
                lon=lon,
                error_code=error.code,
                error=str(exc),
            )
            raise error from exc

        series = openmeteo.RawSeries.from_payload(payload)
        label = self._label(lat, lon)
        if now is None:
            now = series.to_local(datetime.now(UTC))

        report = WeatherReport(
            units=units,
            current=build_current_conditions(series, label, now),
            forecast=aggregate_forecast(series, label),
        )

        logger.info(
            "weather_report_built",
            lat=lat,
            lon=lon,
            units=str(units),
            city=label.city,
            forecast_days=len(report.forecast.days),
            latency_ms=int((time.perf_counter() - start_time) * 1000),
        )
        return report

    def fetch_by_city_name(
        self,
        name: str,
        units: Units = Units.METRIC,
        now: datetime | None = None,
    ) -> WeatherReport:
        """
        Resolve a city name, then delegate to ``fetch_by_coordinates``.

        Raises:
            NotFoundError: If ``name`` is blank or matches no place. No
                forecast request is made in that case.
            WeatherError: Any other failure, as for ``fetch_by_coordinates``.
        """
        query = name.strip()
        if not query:
            raise NotFoundError("City name is empty")

        try:
            location = self.resolver.resolve(query)
        except requests.RequestException as exc:
            error = translate_transport_error(exc)
            logger.warning("city_search_failed", city=query, error_code=error.code, error=str(exc))
            raise error from exc

        if location is None:
            logger.info("city_not_found", city=query)
            raise NotFoundError(f"City not found: {query}")

        logger.debug(
            "city_resolved",
            city=query,
            name=location.name,
            lat=location.latitude,
            lon=location.longitude,
        )
        return self.fetch_by_coordinates(location.latitude, location.longitude, units, now)

    def _label(self, lat: float, lon: float) -> PlaceLabel:
        """Best-effort city/country label; failures degrade to "Unknown"."""
        try:
            return self.resolver.reverse_resolve(lat, lon)
        except (requests.RequestException, ValueError, WeatherError) as exc:
            logger.warning(
                "reverse_lookup_failed",
                lat=lat,
                lon=lon,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return PlaceLabel.unknown()
