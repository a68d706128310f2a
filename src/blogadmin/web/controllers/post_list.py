"""Controller listing the posts the acting user manages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blogadmin.web.controllers.view_models import ListViewModel

if TYPE_CHECKING:
    from blogadmin.ports.http import Request, Response, ResponseFactory, TemplateEngine
    from blogadmin.ports.repository import PostRepository

LIST_DENIED = "Only signed-in users can manage posts."


class PostListController:
    def __init__(
        self,
        post_repository: PostRepository,
        template_engine: TemplateEngine,
        response_factory: ResponseFactory,
    ) -> None:
        self._post_repository = post_repository
        self._template_engine = template_engine
        self._response_factory = response_factory

    def list_action(self, request: Request) -> Response:
        """Lists the user's own posts; admins see every post."""
        user = request.user
        if user is None:
            return self._response_factory.access_denied(LIST_DENIED)

        if user.is_admin:
            posts = self._post_repository.find_all()
        else:
            posts = self._post_repository.find_by_author(user.id)

        return self._template_engine.render_response(
            "admin/post/list.html", ListViewModel.from_posts(posts)
        )
