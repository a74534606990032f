"""ORM models used by the application infrastructure."""

from .application import ApplicationModel
from .comment import CommentModel
from .investment import InvestmentModel
from .investment_term import InvestmentTermModel
from .milestone import MilestoneModel
from .milestone_payout import MilestonePayoutModel
from .notification import NotificationModel
from .post import PostModel
from .program import ProgramModel
from .program_user_role import ProgramUserRoleModel
from .user import UserModel
from .user_tier_assignment import UserTierAssignmentModel

__all__ = [
    "ApplicationModel",
    "CommentModel",
    "InvestmentModel",
    "InvestmentTermModel",
    "MilestoneModel",
    "MilestonePayoutModel",
    "NotificationModel",
    "PostModel",
    "ProgramModel",
    "ProgramUserRoleModel",
    "UserModel",
    "UserTierAssignmentModel",
]
