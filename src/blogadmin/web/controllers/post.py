"""Controller managing a single post in the admin backend.

Every action is read, then decide, then act: the post is loaded, the
action is authorized against that concrete post, and only then are
forms bound or the post mutated. A denied decision ends the action with
an access-denied response.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blogadmin.domain.ids import PostId
from blogadmin.domain.types import PostAction
from blogadmin.ports.repository import PostNotFoundError
from blogadmin.web.controllers.view_models import EditViewModel, GetViewModel

if TYPE_CHECKING:
    from blogadmin.domain.post import Post
    from blogadmin.ports.auth import AuthenticationService, AuthorizationService
    from blogadmin.ports.flash import FlashMessageService
    from blogadmin.ports.form import FormFactory
    from blogadmin.ports.http import (
        Request,
        Response,
        ResponseFactory,
        TemplateEngine,
        UrlGenerator,
    )
    from blogadmin.ports.repository import PostRepository
    from blogadmin.services.post import PostService
    from blogadmin.services.result import ServiceResult

logger = logging.getLogger(__name__)

SHOW_DENIED = "Posts can only be shown to their authors."
EDIT_DENIED = "Posts can only be edited by their authors."
DELETE_DENIED = "Posts can only be deleted by an admin or the author."


class PostController:
    def __init__(
        self,
        post_service: PostService,
        post_repository: PostRepository,
        flash_message_service: FlashMessageService,
        url_generator: UrlGenerator,
        template_engine: TemplateEngine,
        response_factory: ResponseFactory,
        form_factory: FormFactory,
        authorization_service: AuthorizationService,
        authentication_service: AuthenticationService,
    ) -> None:
        self._post_service = post_service
        self._post_repository = post_repository
        self._flash_message_service = flash_message_service
        self._url_generator = url_generator
        self._template_engine = template_engine
        self._response_factory = response_factory
        self._form_factory = form_factory
        self._authorization_service = authorization_service
        self._authentication_service = authentication_service

    def get_action(self, request: Request) -> Response:
        """Finds and displays a post."""
        post = self._find_post(request)
        decision = self._authorization_service.deny_access_unless_granted(
            [], PostAction.SHOW, SHOW_DENIED, post
        )
        if decision.denied:
            return self._response_factory.access_denied(decision.message)

        return self._template_engine.render_response(
            "admin/post/get.html", GetViewModel.from_post(post)
        )

    def edit_action(self, request: Request) -> Response:
        """Displays a form to edit an existing post."""
        post = self._find_post(request)
        decision = self._authorization_service.deny_access_unless_granted(
            [], PostAction.EDIT, EDIT_DENIED, post
        )
        if decision.denied:
            return self._response_factory.access_denied(decision.message)

        form = self._form_factory.create_edit_post_form(
            post,
            action=self._url_generator.generate_url("admin_post_post", {"id": str(post.id)}),
        )
        return self._template_engine.render_response(
            "admin/post/edit.html", EditViewModel.from_post_and_form(post, form)
        )

    def post_action(self, request: Request) -> Response:
        """Receives the edit form submission for an existing post."""
        post = self._find_post(request)
        decision = self._authorization_service.deny_access_unless_granted(
            [], PostAction.EDIT, EDIT_DENIED, post
        )
        if decision.denied:
            return self._response_factory.access_denied(decision.message)

        form = self._form_factory.create_edit_post_form(post)
        form.handle_request(request)

        if not form.should_be_processed():
            logger.debug("Edit of post %s not processed (form %s)", post.id, form.state)
            return self._response_factory.redirect_to_route("admin_post_edit", {"id": str(post.id)})

        self._require_written(self._post_service.update(post, form.data), post)
        self._flash_message_service.success("post.updated_successfully")

        return self._response_factory.redirect_to_route("admin_post_edit", {"id": str(post.id)})

    def delete_action(self, request: Request) -> Response:
        """Deletes a post.

        An invalid anti-forgery token redirects to the list without
        deleting anything and without a message.
        """
        post = self._find_post(request)
        decision = self._authorization_service.deny_access_unless_granted(
            [], PostAction.DELETE, DELETE_DENIED, post
        )
        if decision.denied:
            return self._response_factory.access_denied(decision.message)

        token = str(request.parsed_body.get("token") or "")
        if not self._authentication_service.is_csrf_token_valid("delete", token):
            return self._response_factory.redirect_to_route("admin_post_list")

        self._require_written(self._post_service.delete(post), post)
        self._flash_message_service.success("post.deleted_successfully")

        return self._response_factory.redirect_to_route("admin_post_list")

    def _find_post(self, request: Request) -> Post:
        raw_id = request.get_attribute("id") or ""
        try:
            post_id = PostId(raw_id)
        except ValueError:
            raise PostNotFoundError(raw_id) from None
        return self._post_repository.find(post_id)

    @staticmethod
    def _require_written(result: ServiceResult, post: Post) -> None:
        """Raise when the service reports that *post* was not written.

        The only failure update and delete report is a row that vanished
        after the lookup, so it surfaces like any other missing post.
        """
        if result.ok:
            return
        logger.info("Post %s gone before %s: %s", post.id, result.op, result.error)
        raise PostNotFoundError(post.id)
