"""Use cases for application milestones."""

from .check_milestone import check_milestone
from .create_milestones import MilestoneDraft, create_milestones
from .list_milestones import list_milestones
from .submit_milestone import submit_milestone

__all__ = [
    "MilestoneDraft",
    "check_milestone",
    "create_milestones",
    "list_milestones",
    "submit_milestone",
]
