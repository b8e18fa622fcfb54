"""
Shared services.

Simple modules with no knowledge of any particular source. No magic.

- http.py    - Session without retries plus ``fetch_json``
- printer.py - Pipes the report into ``lp``
"""
