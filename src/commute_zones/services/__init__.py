"""
Shared service utilities.

- http.py - requests.Session with urllib3 retry/backoff and default timeout
- upstream.py - HTTP status → CommuteZonesError mapping
"""
