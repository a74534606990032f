"""Use cases for investment terms, investments and reclaims."""

from .create_investment import create_investment
from .investment_terms import (
    create_investment_term,
    delete_investment_term,
    list_investment_terms,
    update_investment_term,
)
from .list_investments import get_investment, list_investments
from .reclaim_investment import reclaim_investment

__all__ = [
    "create_investment",
    "create_investment_term",
    "delete_investment_term",
    "get_investment",
    "list_investment_terms",
    "list_investments",
    "reclaim_investment",
    "update_investment_term",
]
