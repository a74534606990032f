"""Repository implementations for infrastructure layer."""

from .access_repository import AccessRepository, ScopeOwners
from .application_repository import ApplicationRepository
from .comment_repository import CommentRepository
from .investment_repository import InvestmentRepository
from .investment_term_repository import InvestmentTermRepository
from .milestone_payout_repository import MilestonePayoutRepository
from .milestone_repository import MilestoneRepository
from .notification_repository import NotificationRepository
from .post_repository import PostRepository
from .program_repository import ProgramRepository
from .program_user_role_repository import ProgramUserRoleRepository
from .user_repository import UserRepository
from .user_tier_assignment_repository import UserTierAssignmentRepository

__all__ = [
    "AccessRepository",
    "ScopeOwners",
    "ApplicationRepository",
    "CommentRepository",
    "InvestmentRepository",
    "InvestmentTermRepository",
    "MilestonePayoutRepository",
    "MilestoneRepository",
    "NotificationRepository",
    "PostRepository",
    "ProgramRepository",
    "ProgramUserRoleRepository",
    "UserRepository",
    "UserTierAssignmentRepository",
]
