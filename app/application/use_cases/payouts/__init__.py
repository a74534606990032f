"""Use cases for milestone payouts."""

from .create_milestone_payouts import create_milestone_payouts, milestone_share
from .milestone_payouts import list_milestone_payouts, process_milestone_payouts

__all__ = [
    "create_milestone_payouts",
    "list_milestone_payouts",
    "milestone_share",
    "process_milestone_payouts",
]
