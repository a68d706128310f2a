"""Jinja2 template rendering with per-project override support."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    select_autoescape,
)

from blogadmin.ports.http import Response

HTML_CONTENT_TYPE = "text/html; charset=utf-8"


def build_template_environment(*, override_dir: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    Overrides are looked up in *override_dir* (``{root}/templates`` by
    convention) using the same relative names as the packaged templates.
    """
    loaders: list[BaseLoader] = []
    if override_dir is not None:
        loaders.append(FileSystemLoader(str(override_dir)))
    loaders.append(PackageLoader("blogadmin", "templates"))
    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(["html"]),
        keep_trailing_newline=True,
    )


class JinjaTemplateEngine:
    """TemplateEngine adapter: the view model is exposed to templates as ``view``."""

    def __init__(self, environment: Environment) -> None:
        self._env = environment

    @property
    def environment(self) -> Environment:
        return self._env

    def add_global(self, name: str, value: Callable[..., Any] | Any) -> None:
        self._env.globals[name] = value

    def add_filter(self, name: str, func: Callable[..., Any]) -> None:
        self._env.filters[name] = func

    def render(self, template_id: str, view_model: Any) -> str:
        return self._env.get_template(template_id).render(view=view_model)

    def render_response(self, template_id: str, view_model: Any) -> Response:
        body = self.render(template_id, view_model)
        return Response(status=200, body=body, headers={"content-type": HTML_CONTENT_TYPE})
