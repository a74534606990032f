"""Use cases for managing programs."""

from .assign_investment_tier import assign_investment_tier
from .assign_program_role import assign_program_role
from .check_program_completion import check_program_completion
from .create_program import create_program
from .get_program import get_program
from .list_programs import list_programs

__all__ = [
    "assign_investment_tier",
    "assign_program_role",
    "check_program_completion",
    "create_program",
    "get_program",
    "list_programs",
]
