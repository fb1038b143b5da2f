"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    ├── models.py         # Dataclasses for API responses (optional)
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Sources:
  - openmeteo/   Forecast source: current + hourly + daily series
  - nominatim/   Location resolver: city search and reverse geocoding

Fetch functions raise ``requests`` exceptions unchanged; translating them
into ``skycast.errors`` is the job of ``services/weather.py``.

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.

2. Write fetch functions that return dicts, dataclasses or schema models::

       from skycast.services.http import session

       def fetch_something(lat, lon) -> dict[str, Any]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return resp.json()

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Add tests in ``tests/test_{name}.py``.
"""
