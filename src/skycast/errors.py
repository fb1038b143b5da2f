"""Error taxonomy surfaced to callers of the weather service.

The normalize package raises ``MalformedPayloadError`` and
``AlignmentOutOfRangeError`` directly. Transport failures from the
datasources arrive as ``requests`` exceptions and are translated into the
remaining types by ``services.weather``.
"""

from __future__ import annotations


class WeatherError(Exception):
    """Base class for every error the weather service exposes."""

    code = "weather_error"
    default_message = "An unexpected error occurred while fetching weather data."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class NotFoundError(WeatherError):
    """City name (or requested data) could not be found."""

    code = "not_found"
    default_message = "Location not found."


class MalformedPayloadError(WeatherError):
    """Provider answered, but required fields or arrays are missing."""

    code = "malformed_payload"
    default_message = "Weather provider returned an incomplete response."


class RateLimitedError(WeatherError):
    code = "rate_limited"
    default_message = "Request limit exceeded. Please try again later."


class ServerError(WeatherError):
    code = "server_error"
    default_message = "Weather server error."


class NoConnectionError(WeatherError):
    code = "no_connection"
    default_message = "No connection to the weather server."


class AlignmentOutOfRangeError(WeatherError):
    """The reference hour has no matching sample on the hourly axis."""

    code = "alignment_out_of_range"
    default_message = "Current hour is outside the forecast time range."
