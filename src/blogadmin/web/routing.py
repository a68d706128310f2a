"""Named routes, URL generation, and redirect responses."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from string import Formatter
from urllib.parse import quote

from blogadmin.ports.http import Response


@dataclass(frozen=True)
class Route:
    name: str
    method: str
    path: str

    @property
    def parameters(self) -> list[str]:
        return [field for _, field, _, _ in Formatter().parse(self.path) if field]


ROUTES: tuple[Route, ...] = (
    Route("admin_post_list", "GET", "/admin/post/"),
    Route("admin_post_get", "GET", "/admin/post/{id}"),
    Route("admin_post_edit", "GET", "/admin/post/{id}/edit"),
    Route("admin_post_post", "POST", "/admin/post/{id}"),
    Route("admin_post_delete", "POST", "/admin/post/{id}/delete"),
)


class Router:
    """UrlGenerator over a fixed route table.

    Raises:
        KeyError: Unknown route name.
        ValueError: A path parameter is missing.
    """

    def __init__(self, routes: tuple[Route, ...] = ROUTES, *, base_url: str = "") -> None:
        self._routes = {route.name: route for route in routes}
        self._base_url = base_url.rstrip("/")

    def route(self, name: str) -> Route:
        try:
            return self._routes[name]
        except KeyError:
            msg = f"Unknown route: {name!r}"
            raise KeyError(msg) from None

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes.values())

    def generate_url(self, route_name: str, params: Mapping[str, str] | None = None) -> str:
        route = self.route(route_name)
        params = dict(params or {})
        missing = [name for name in route.parameters if name not in params]
        if missing:
            msg = f"Route {route_name!r} requires parameters: {', '.join(missing)}"
            raise ValueError(msg)
        path = route.path.format(**{k: quote(str(v), safe="") for k, v in params.items()})
        return f"{self._base_url}{path}"


class RedirectResponseFactory:
    """ResponseFactory producing redirects and access-denied responses."""

    def __init__(self, url_generator: Router, *, redirect_status: int = 302) -> None:
        self._urls = url_generator
        self._status = redirect_status

    def redirect(self, url: str) -> Response:
        return Response(status=self._status, headers={"location": url})

    def redirect_to_route(
        self, route_name: str, params: Mapping[str, str] | None = None
    ) -> Response:
        return self.redirect(self._urls.generate_url(route_name, params))

    def access_denied(self, message: str) -> Response:
        return Response(
            status=403,
            body=message,
            headers={"content-type": "text/plain; charset=utf-8"},
        )
