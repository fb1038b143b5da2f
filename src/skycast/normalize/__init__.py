"""Raw forecast series -> UI-ready weather records.

This is the domain logic layer. It turns a parsed Open-Meteo response
(``datasources.openmeteo.RawSeries``) into ``schemas`` models.

Dependency rule: normalize/ imports datasource *models* only. It never
fetches data, reads the clock, or logs; the reference instant for
"current" is always passed in.

Modules:
  - codes: WMO weather code -> description / icon / display glyph
  - units: pressure conversion, compass labels, rounding policy
  - align: hourly sample <-> reference hour / calendar date
  - current: snapshot + aligned hour + daily extremes -> CurrentConditions
  - forecast: daily entries + bucketed hours -> Forecast
"""

from skycast.normalize.align import bucket_by_date, current_hour_index, indices_for_date
from skycast.normalize.codes import Condition, WeatherCode, classify, icon_url, to_display_symbol
from skycast.normalize.current import build_current_conditions
from skycast.normalize.forecast import FORECAST_DAYS, aggregate_forecast
from skycast.normalize.units import convert_pressure, round_half_up, wind_direction_label

__all__ = [
    "FORECAST_DAYS",
    "Condition",
    "WeatherCode",
    "aggregate_forecast",
    "bucket_by_date",
    "build_current_conditions",
    "classify",
    "convert_pressure",
    "current_hour_index",
    "icon_url",
    "indices_for_date",
    "round_half_up",
    "to_display_symbol",
    "wind_direction_label",
]
