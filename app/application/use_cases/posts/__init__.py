"""Use cases for community posts."""

from .create_post import create_post
from .get_post import get_post, list_posts
from .update_post import update_post

__all__ = ["create_post", "get_post", "list_posts", "update_post"]
