"""Path-pattern routing of requests to controller methods."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from .web import Request, Response


class HttpMethod(str, Enum):
    ALL = "*"
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


def http_method_from_string(method: str) -> HttpMethod | str:
    """Accept an upper-case method name.

    Names outside the known set come back unchanged and match no specific route.
    """
    if method.upper() != method:
        raise ValueError(f"invalid http method: {method}")
    try:
        return HttpMethod(method)
    except ValueError:
        return method


ControllerMethod = Callable[[Request], Response]


@dataclass
class Route:
    path: str
    http_method: HttpMethod
    controller_method: ControllerMethod


@dataclass
class Router:
    routes: list[Route] = field(default_factory=list)

    def add_route(self, route: Route) -> None:
        self.routes.append(route)


def _segments(path: str) -> list[str]:
    if path.startswith("/"):
        path = path[1:]
    parts = path.split("/")
    if not all(parts):
        raise ValueError(f"route path has an empty segment: {path!r}")
    return parts


def _is_placeholder(segment: str) -> bool:
    return segment.startswith("{") and segment.endswith("}")


def regexify_route(path: str) -> re.Pattern[str]:
    """Compile a route path such as /post/{id} into an anchored pattern."""
    pattern = "".join(
        "/([^/]+)" if _is_placeholder(part) else re.escape("/" + part)
        for part in _segments(path)
    )
    return re.compile(f"^{pattern}\\Z")


def route_matches(
    route: Route, http_method: HttpMethod | str, path: str
) -> dict[str, str] | None:
    """Return the route parameters if the route accepts the request, else None."""
    if route.http_method != http_method and route.http_method != HttpMethod.ALL:
        return None

    found = regexify_route(route.path).match(path)
    if found is None:
        return None

    names = [part[1:-1] for part in _segments(route.path) if _is_placeholder(part)]
    return dict(zip(names, found.groups()))