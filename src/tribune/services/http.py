"""
Shared HTTP client and JSON fetcher.

Provides a pre-configured ``requests.Session`` and ``fetch_json``, the one
place the paper talks to the network. Retries are switched off: a failed
source means no paper today, and the job simply runs again tomorrow.

Usage::

    from tribune.services.http import fetch_json

    data = fetch_json("https://api.example.com/v1/data", params={"q": "x"})
    if data is None:
        ...  # already reported, give up on this source
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

#: No retries, no backoff.
DEFAULT_RETRY = Retry(
    total=0,
    read=False,
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

USER_AGENT = "tribune/0.1 (morning paper printer)"


def create_session(
    retry: Retry | None = None,
    timeout: float | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Timeout applied to requests that pass none. ``None`` keeps
            the requests default, which waits indefinitely.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    # reddit answers 429 to the stock python-requests agent
    s.headers["User-Agent"] = USER_AGENT

    if timeout is not None:
        send = s.send

        def send_with_timeout(
            prepared: requests.PreparedRequest, **kwargs: object
        ) -> requests.Response:
            kwargs.setdefault("timeout", timeout)
            return send(prepared, **kwargs)  # type: ignore[arg-type]

        s.send = send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly. No timeout override.
session: requests.Session = create_session()


def fetch_json(url: str, params: dict[str, Any] | None = None) -> dict[str, Any] | None:
    """
    GET ``url`` and decode the body as a JSON object.

    Never raises for network or decoding problems: prints a diagnostic and
    returns ``None`` so the caller can decide what a missing source means.

    Args:
        url: Endpoint URL.
        params: Optional query-string parameters.

    Returns:
        The decoded JSON object, or ``None`` on any failure.
    """
    try:
        resp = session.get(url, params=params)
        resp.raise_for_status()
    except requests.RequestException as e:
        print(f"Error fetching data: {e}")
        return None

    try:
        result = resp.json()
    except ValueError as e:
        print(f"Error parsing JSON: {e}")
        return None

    if not isinstance(result, dict):
        print(f"Error parsing JSON: expected an object, got {type(result).__name__}")
        return None
    return result
