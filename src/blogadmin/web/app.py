"""FastAPI application exposing the admin controllers.

Collaborators are wired once in :func:`build_container`. Each HTTP
request is translated to a port :class:`~blogadmin.ports.http.Request`,
dispatched to its controller action inside :func:`request_scope`, and
the port response translated back.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

import structlog
from fastapi import FastAPI
from fastapi import Request as HttpRequest
from fastapi import Response as HttpResponse
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.middleware.sessions import SessionMiddleware

from blogadmin import __version__
from blogadmin.config.settings import BlogSettings
from blogadmin.infrastructure.repositories.post import SqlPostRepository
from blogadmin.infrastructure.repositories.user import SqlUserRepository
from blogadmin.infrastructure.store import Database
from blogadmin.infrastructure.templates import JinjaTemplateEngine, build_template_environment
from blogadmin.ports.http import Request, Response
from blogadmin.ports.repository import PostNotFoundError
from blogadmin.services.authorization import AuthorizationService
from blogadmin.services.post import PostService
from blogadmin.web.context import current_user, request_scope
from blogadmin.web.controllers import PostController, PostListController
from blogadmin.web.flash import SessionFlashMessageService, translate
from blogadmin.web.forms import EditPostFormFactory
from blogadmin.web.routing import RedirectResponseFactory, Router
from blogadmin.web.security import CsrfTokenManager

logger = logging.getLogger(__name__)

Action = Callable[[Request], Response]


@dataclass
class Container:
    """Every long-lived collaborator of the web application."""

    settings: BlogSettings
    database: Database
    posts: SqlPostRepository
    users: SqlUserRepository
    post_service: PostService
    router: Router
    responses: RedirectResponseFactory
    templates: JinjaTemplateEngine
    flashes: SessionFlashMessageService
    csrf: CsrfTokenManager
    authorization: AuthorizationService
    post_controller: PostController
    post_list_controller: PostListController

    def actions(self) -> dict[str, Action]:
        """Route name to controller action."""
        return {
            "admin_post_list": self.post_list_controller.list_action,
            "admin_post_get": self.post_controller.get_action,
            "admin_post_edit": self.post_controller.edit_action,
            "admin_post_post": self.post_controller.post_action,
            "admin_post_delete": self.post_controller.delete_action,
        }


def build_container(settings: BlogSettings, *, database: Database | None = None) -> Container:
    database = database or Database.from_settings(settings)
    posts = SqlPostRepository(database)
    users = SqlUserRepository(database)
    post_service = PostService(database, posts)

    router = Router()
    responses = RedirectResponseFactory(router)
    flashes = SessionFlashMessageService()
    csrf = CsrfTokenManager()
    authorization = AuthorizationService(current_user)

    override_dir = settings.templates_dir if settings.templates_dir.is_dir() else None
    templates = JinjaTemplateEngine(build_template_environment(override_dir=override_dir))
    templates.add_global("blog_name", settings.blog.name)
    templates.add_global("csrf_token", csrf.get_token)
    templates.add_global("flashes", flashes.consume)
    templates.add_global("path", lambda name, **params: router.generate_url(name, params))
    templates.add_global("current_user", current_user)
    templates.add_filter("trans", translate)

    post_controller = PostController(
        post_service,
        posts,
        flashes,
        router,
        templates,
        responses,
        EditPostFormFactory(),
        authorization,
        csrf,
    )
    post_list_controller = PostListController(posts, templates, responses)

    return Container(
        settings=settings,
        database=database,
        posts=posts,
        users=users,
        post_service=post_service,
        router=router,
        responses=responses,
        templates=templates,
        flashes=flashes,
        csrf=csrf,
        authorization=authorization,
        post_controller=post_controller,
        post_list_controller=post_list_controller,
    )


async def to_port_request(request: HttpRequest, users: SqlUserRepository, header: str) -> Request:
    """Translate a Starlette request, resolving the acting user from *header*."""
    body: dict[str, Any] = {}
    if request.method in ("POST", "PUT", "PATCH"):
        form = await request.form()
        body = {key: value for key, value in form.items() if isinstance(value, str)}

    username = request.headers.get(header)
    user = await run_in_threadpool(users.find_by_username, username) if username else None

    return Request(
        method=request.method,
        attributes={key: str(value) for key, value in request.path_params.items()},
        parsed_body=body,
        session=request.session,
        user=user,
    )


def to_http_response(response: Response) -> HttpResponse:
    return HttpResponse(
        content=response.body,
        status_code=response.status,
        headers=dict(response.headers),
    )


def _dispatch(action: Action, request: Request) -> Response:
    with request_scope(request):
        return action(request)


def _endpoint(
    route_name: str, action: Action, container: Container
) -> Callable[[HttpRequest], Awaitable[HttpResponse]]:
    header = container.settings.web.remote_user_header

    async def endpoint(request: HttpRequest) -> HttpResponse:
        port_request = await to_port_request(request, container.users, header)
        with structlog.contextvars.bound_contextvars(
            route=route_name,
            user=port_request.user.username if port_request.user else None,
        ):
            response = await run_in_threadpool(_dispatch, action, port_request)
            logger.debug("%s %s -> %s", request.method, request.url.path, response.status)
        return to_http_response(response)

    endpoint.__name__ = route_name
    return endpoint


def create_app(
    settings: BlogSettings | None = None, *, database: Database | None = None
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Resolved settings; discovered from the CWD when omitted.
        database: Pre-opened database (tests); opened from settings otherwise.
    """
    settings = settings or BlogSettings.from_cli()
    container = build_container(settings, database=database)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        if database is None:
            container.database.close()

    app = FastAPI(title=settings.blog.name, version=__version__, lifespan=lifespan)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.web.secret_key,
        session_cookie=settings.web.session_cookie,
    )
    app.state.container = container

    @app.exception_handler(PostNotFoundError)
    async def _post_not_found(_request: HttpRequest, exc: PostNotFoundError) -> HttpResponse:
        return PlainTextResponse(str(exc), status_code=404)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": __version__}

    actions = container.actions()
    for route in container.router:
        app.add_api_route(
            route.path,
            _endpoint(route.name, actions[route.name], container),
            methods=[route.method],
            name=route.name,
            response_model=None,
        )

    return app
