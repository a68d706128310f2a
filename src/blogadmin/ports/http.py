"""HTTP-facing ports: request/response values, rendering, routing.

The controller only ever sees these types. Framework adapters
(:mod:`blogadmin.web`) translate to and from the real HTTP stack.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from blogadmin.domain.user import User


@dataclass
class Request:
    """One inbound request as seen by a controller.

    Attributes:
        method: HTTP method, upper-case.
        attributes: Route-bound parameters (e.g. ``{"id": "42"}``).
        parsed_body: Decoded form body; empty for GET.
        session: Per-client session storage.
        user: The acting user, or None when anonymous.
    """

    method: str = "GET"
    attributes: Mapping[str, str] = field(default_factory=dict)
    parsed_body: Mapping[str, Any] = field(default_factory=dict)
    session: MutableMapping[str, Any] = field(default_factory=dict)
    user: User | None = None

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)


@dataclass(frozen=True)
class Response:
    """Framework-neutral response value."""

    status: int = 200
    body: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def location(self) -> str | None:
        return self.headers.get("location")

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status < 400 and self.location is not None


class TemplateEngine(Protocol):
    """Renders a template with a view model into a response."""

    def render_response(self, template_id: str, view_model: Any) -> Response: ...


class UrlGenerator(Protocol):
    """Builds URLs from route names."""

    def generate_url(self, route_name: str, params: Mapping[str, str] | None = None) -> str: ...


class ResponseFactory(Protocol):
    """Creates non-rendered responses."""

    def redirect_to_route(
        self, route_name: str, params: Mapping[str, str] | None = None
    ) -> Response: ...

    def access_denied(self, message: str) -> Response: ...
