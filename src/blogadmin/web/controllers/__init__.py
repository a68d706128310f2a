"""Admin controllers. Each action maps one port ``Request`` to one ``Response``."""

from blogadmin.web.controllers.post import PostController
from blogadmin.web.controllers.post_list import PostListController

__all__ = ["PostController", "PostListController"]
