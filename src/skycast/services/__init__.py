"""
Service layer.

- http.py     - Shared requests.Session (retry on gateway errors, default timeout)
- weather.py  - WeatherService facade: resolve -> fetch -> normalize
"""
