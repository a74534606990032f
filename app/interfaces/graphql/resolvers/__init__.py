"""GraphQL resolvers grouped by domain area."""

from .applications import ApplicationMutation, ApplicationQuery
from .investments import InvestmentMutation, InvestmentQuery
from .notifications import NotificationMutation, NotificationQuery, NotificationSubscription
from .posts import PostMutation, PostQuery
from .programs import ProgramMutation, ProgramQuery
from .users import UserMutation, UserQuery

__all__ = [
    "ApplicationMutation",
    "ApplicationQuery",
    "InvestmentMutation",
    "InvestmentQuery",
    "NotificationMutation",
    "NotificationQuery",
    "NotificationSubscription",
    "PostMutation",
    "PostQuery",
    "ProgramMutation",
    "ProgramQuery",
    "UserMutation",
    "UserQuery",
]
