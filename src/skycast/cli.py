"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

from skycast import __version__
from skycast.config import get_settings
from skycast.errors import WeatherError
from skycast.log import configure_logging
from skycast.normalize.codes import to_display_symbol
from skycast.schemas import Units
from skycast.services.weather import WeatherService

if TYPE_CHECKING:
    from skycast.schemas import CurrentConditions, Forecast, WeatherReport

_TEMP_SUFFIX = {Units.METRIC: "°C", Units.IMPERIAL: "°F"}
_SPEED_SUFFIX = {Units.METRIC: "m/s", Units.IMPERIAL: "mph"}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="skycast",
        description="Current weather and 5-day forecast from Open-Meteo",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Location options shared by 'current' and 'forecast'
    location = argparse.ArgumentParser(add_help=False)
    location.add_argument("--city", type=str, default=None, help="City name to look up")
    location.add_argument("--lat", type=float, default=None, help="Latitude (default: settings)")
    location.add_argument("--lon", type=float, default=None, help="Longitude (default: settings)")
    location.add_argument(
        "--units",
        choices=[u.value for u in Units],
        default=None,
        help="Measurement system (default: settings)",
    )

    subparsers.add_parser("current", parents=[location], help="Show current conditions")
    subparsers.add_parser("forecast", parents=[location], help="Show the 5-day forecast")
    subparsers.add_parser("info", help="Show application info")

    return parser


def _fetch_report(args: argparse.Namespace) -> WeatherReport:
    """Fetch a report for the location given on the command line."""
    settings = get_settings()
    units = Units(args.units) if args.units else settings.units
    service = WeatherService.from_settings(settings)

    if args.city:
        return service.fetch_by_city_name(args.city, units)

    lat = args.lat if args.lat is not None else settings.lat
    lon = args.lon if args.lon is not None else settings.lon
    return service.fetch_by_coordinates(lat, lon, units)


def format_current(current: CurrentConditions, units: Units) -> str:
    """Render current conditions as plain text."""
    t = _TEMP_SUFFIX[units]
    place = f"{current.city_name}, {current.country}" if current.country else current.city_name
    return "\n".join(
        [
            f"{place} at {current.observed_at:%Y-%m-%d %H:%M}",
            f"{to_display_symbol(current.icon)} {current.description}, "
            f"{current.temp}{t} (feels like {current.feels_like}{t})",
            f"Min/max: {current.temp_min}{t} / {current.temp_max}{t}",
            f"Humidity: {current.humidity}%  Pressure: {current.pressure} mmHg",
            f"Wind: {current.wind_speed} {_SPEED_SUFFIX[units]} {current.wind_direction}",
            f"Clouds: {current.clouds}%  Visibility: {current.visibility} m",
            f"Sunrise {current.sunrise:%H:%M}, sunset {current.sunset:%H:%M}",
        ]
    )


def format_forecast(forecast: Forecast, units: Units) -> str:
    """Render the forecast as one line per day."""
    t = _TEMP_SUFFIX[units]
    lines = [f"{forecast.city}, {forecast.country}" if forecast.country else forecast.city]
    for day in forecast.days:
        humidity = f"{day.humidity}%" if day.humidity is not None else "n/a"
        wind = f"{day.wind_speed} {_SPEED_SUFFIX[units]}" if day.wind_speed is not None else "n/a"
        lines.append(
            f"{day.date:%a %d %b}  {to_display_symbol(day.icon)} {day.description:<28} "
            f"{day.temp_min:>3}{t} .. {day.temp_max:>3}{t}  "
            f"humidity {humidity}  wind {wind}"
        )
    return "\n".join(lines)


def cmd_current(args: argparse.Namespace) -> int:
    """Handle the 'current' command."""
    report = _fetch_report(args)
    print(format_current(report.current, report.units))
    return 0


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    report = _fetch_report(args)
    print(format_forecast(report.forecast, report.units))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Default location: ({settings.lat}, {settings.lon})")
    print(f"Units: {settings.units}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    configure_logging(
        "DEBUG" if args.debug or settings.debug else settings.log_level,
        json_output=settings.log_json,
    )

    commands = {
        "current": cmd_current,
        "forecast": cmd_forecast,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except WeatherError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
