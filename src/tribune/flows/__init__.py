"""
Prefect flows for the morning run.

Flows:
- fetch: Pull weather, quotes, headlines and reddit into an ``Edition``
- build: Assemble the report text and send it to the printer

Usage (local):
    tribune                      # fetch, build, print
    tribune preview              # fetch, build, write to stdout
    python -m tribune.flows.build

Usage (cron):
    0 6 * * * STOCKS_API_KEY=... NEWS_API_KEY=... tribune
"""
