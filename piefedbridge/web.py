"""Request and response values of the proxy and their JSON rendering."""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from http import HTTPStatus
from typing import Any

from pydantic import BaseModel

from .piefed_models import _WireModel

logger = logging.getLogger(__name__)

APPLICATION_JSON = "application/json"


@dataclass
class Request:
    """An incoming request as the controllers see it."""

    body: bytes = b""
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    route_params: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] = field(default_factory=dict)


@dataclass
class Response:
    """A response produced by a controller; zero status means 200."""

    status_code: int = 0
    body: Any = None
    headers: dict[str, str] | None = None


class InternalError(_WireModel):
    error: str = ""


def internal_proxy_error() -> Response:
    return Response(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        body=InternalError(error="internal lemmy layer proxy error"),
    )


def not_found_proxy_error() -> Response:
    return Response(
        status_code=HTTPStatus.NOT_FOUND,
        body=InternalError(error="not found"),
    )


def not_implemented_response() -> Response:
    return Response(
        status_code=HTTPStatus.NOT_IMPLEMENTED,
        body=InternalError(
            error="this method has not been implemented yet in the proxy (or piefed)"
        ),
    )


def not_implemented_feature(description: str) -> Response:
    return Response(
        status_code=HTTPStatus.NOT_IMPLEMENTED,
        body=InternalError(error=description),
    )


def no_content() -> Response:
    return Response(status_code=HTTPStatus.NO_CONTENT)


def _plain(obj: Any) -> Any:
    """Turn models, dataclasses and enums into JSON-ready builtins."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True)
    if isinstance(obj, Enum):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _plain(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, Mapping):
        return {
            (key.value if isinstance(key, Enum) else key): _plain(value)
            for key, value in obj.items()
        }
    if isinstance(obj, (list, tuple)):
        return [_plain(item) for item in obj]
    return obj


def to_json(obj: Any) -> bytes:
    """Serialize to compact JSON bytes; raises TypeError or ValueError on failure."""
    return json.dumps(
        _plain(obj), separators=(",", ":"), ensure_ascii=False, allow_nan=False
    ).encode("utf-8")


def to_json_string(obj: Any) -> str:
    return to_json(obj).decode("utf-8")


def render_response(response: Response) -> tuple[int, dict[str, str], bytes]:
    """Return the status code, headers and body bytes to send for a response."""
    headers = dict(response.headers or {})
    headers.setdefault("Content-Type", APPLICATION_JSON)
    status = int(response.status_code or HTTPStatus.OK)
    body = response.body if response.body is not None else {}

    if isinstance(body, str):
        return status, headers, body.encode("utf-8")

    try:
        payload = to_json(body)
    except (TypeError, ValueError) as exc:
        logger.error("%s", exc)
        payload = to_json({"error": "Internal request error"})
        status = int(HTTPStatus.INTERNAL_SERVER_ERROR)
    return status, headers, payload