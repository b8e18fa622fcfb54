"""Boundary helpers shared by every datasource.

``fetch_json`` reports and swallows network trouble; these helpers turn its
``None`` and any shape mismatch into the exceptions that abort a run.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from tribune.errors import DecodeError, FetchError
from tribune.services import http

ModelT = TypeVar("ModelT", bound=BaseModel)


def require_json(source: str, url: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
    """Fetch a JSON object or raise ``FetchError`` naming ``source``."""
    data = http.fetch_json(url, params=params)
    if data is None:
        raise FetchError(source)
    return data


def decode(model: type[ModelT], data: dict[str, Any], source: str) -> ModelT:
    """Validate ``data`` against ``model``, raising ``DecodeError`` on mismatch."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        # First error is enough for a console line
        err = e.errors()[0]
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        raise DecodeError(source, f"{loc}: {err['msg']}") from e
