"""Use cases for managing users."""

from .create_user import create_user
from .get_user import get_user
from .login import login

__all__ = ["create_user", "get_user", "login"]
