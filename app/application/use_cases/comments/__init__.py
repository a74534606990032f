"""Use cases for comments."""

from .create_comment import create_comment
from .list_comments import get_comment, list_comments

__all__ = ["create_comment", "get_comment", "list_comments"]
