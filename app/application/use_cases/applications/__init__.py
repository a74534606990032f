"""Use cases for program applications."""

from .create_application import create_application
from .list_applications import list_applications
from .review_application import accept_application, reject_application

__all__ = [
    "accept_application",
    "create_application",
    "list_applications",
    "reject_application",
]
