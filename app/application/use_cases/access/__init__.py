"""Authorization rules shared by program, application and milestone use cases."""

from .scope import Scope, ScopeCheck, check_scope, is_in_same_scope, require_scope
from .visibility import AccessDecision, can_access_program, can_apply_to_program

__all__ = [
    "AccessDecision",
    "Scope",
    "ScopeCheck",
    "can_access_program",
    "can_apply_to_program",
    "check_scope",
    "is_in_same_scope",
    "require_scope",
]
