"""External service integrations.

Each subdirectory is one service with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, dedicated sessions
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Services:
  - nominatim/         Address → coordinate (geocoding)
  - openrouteservice/  Origin + mode → isochrone polygons (routing engine)
  - navitia/           Origin + destination → fastest transit duration

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``nominatim/`` for a minimal example.

2. Write fetch functions that return dataclasses or plain values::

       from commute_zones.services.http import session
       from commute_zones.services.upstream import raise_for_upstream_status

       def fetch_something(origin: Coordinate) -> Something:
           resp = session.get(API_URL, params={...})
           raise_for_upstream_status(resp, "Something")
           return _parse(resp.json())

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Use it from a strategy in ``estimation/`` or from ``service.py``.

5. Add tests to ``tests/test_datasources.py``.
"""
