"""Domain entities exposed by the application."""

from .application import (
    APPLICATION_STATUS_ACCEPTED,
    APPLICATION_STATUS_COMPLETED,
    APPLICATION_STATUS_PENDING,
    APPLICATION_STATUS_REJECTED,
    APPLICATION_STATUS_SUBMITTED,
    APPLICATION_STATUS_WITHDRAWN,
    APPLICATION_STATUSES,
    Application,
)
from .investment import (
    INVESTMENT_ACTIVE_STATUSES,
    INVESTMENT_STATUS_CONFIRMED,
    INVESTMENT_STATUS_FAILED,
    INVESTMENT_STATUS_PENDING,
    INVESTMENT_STATUS_REFUNDED,
    INVESTMENT_STATUSES,
    INVESTMENT_TIERS,
    PAYOUT_STATUS_COMPLETED,
    PAYOUT_STATUS_FAILED,
    PAYOUT_STATUS_PENDING,
    PAYOUT_STATUS_PROCESSING,
    PAYOUT_STATUSES,
    Investment,
    InvestmentTerm,
    MilestonePayout,
    UserTierAssignment,
)
from .milestone import (
    MILESTONE_STATUS_COMPLETED,
    MILESTONE_STATUS_PENDING,
    MILESTONE_STATUS_REVISION_REQUESTED,
    MILESTONE_STATUS_SUBMITTED,
    MILESTONE_STATUSES,
    Milestone,
)
from .notification import (
    NOTIFICATION_ACTIONS,
    NOTIFICATION_TYPES,
    PROGRESS_ACTIONS,
    RECLAIM_REASON,
    RECLAIM_TYPES,
    Notification,
    NotificationDraft,
    NotificationFilter,
)
from .post import COMMENTABLE_TYPES, Comment, Post
from .program import (
    PROGRAM_FINAL_STATUSES,
    PROGRAM_ROLE_BUILDER,
    PROGRAM_ROLE_SPONSOR,
    PROGRAM_ROLE_TYPES,
    PROGRAM_ROLE_VALIDATOR,
    PROGRAM_STATUS_CANCELLED,
    PROGRAM_STATUS_CLOSED,
    PROGRAM_STATUS_COMPLETED,
    PROGRAM_STATUS_PENDING,
    PROGRAM_STATUS_PUBLISHED,
    PROGRAM_STATUSES,
    PROGRAM_VISIBILITIES,
    PROGRAM_VISIBILITY_PRIVATE,
    PROGRAM_VISIBILITY_PUBLIC,
    PROGRAM_VISIBILITY_RESTRICTED,
    Program,
    ProgramUserRole,
)
from .user import USER_ROLE_ADMIN, USER_ROLE_SUPERADMIN, USER_ROLE_USER, User

__all__ = [
    "Application",
    "APPLICATION_STATUS_PENDING",
    "APPLICATION_STATUS_ACCEPTED",
    "APPLICATION_STATUS_REJECTED",
    "APPLICATION_STATUS_SUBMITTED",
    "APPLICATION_STATUS_COMPLETED",
    "APPLICATION_STATUS_WITHDRAWN",
    "APPLICATION_STATUSES",
    "COMMENTABLE_TYPES",
    "Comment",
    "Post",
    "Investment",
    "InvestmentTerm",
    "MilestonePayout",
    "UserTierAssignment",
    "INVESTMENT_TIERS",
    "INVESTMENT_STATUS_PENDING",
    "INVESTMENT_STATUS_CONFIRMED",
    "INVESTMENT_STATUS_FAILED",
    "INVESTMENT_STATUS_REFUNDED",
    "INVESTMENT_STATUSES",
    "INVESTMENT_ACTIVE_STATUSES",
    "PAYOUT_STATUS_PENDING",
    "PAYOUT_STATUS_PROCESSING",
    "PAYOUT_STATUS_COMPLETED",
    "PAYOUT_STATUS_FAILED",
    "PAYOUT_STATUSES",
    "Milestone",
    "MILESTONE_STATUS_PENDING",
    "MILESTONE_STATUS_SUBMITTED",
    "MILESTONE_STATUS_COMPLETED",
    "MILESTONE_STATUS_REVISION_REQUESTED",
    "MILESTONE_STATUSES",
    "Notification",
    "NotificationDraft",
    "NotificationFilter",
    "RECLAIM_TYPES",
    "RECLAIM_REASON",
    "PROGRESS_ACTIONS",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_ACTIONS",
    "Program",
    "ProgramUserRole",
    "PROGRAM_VISIBILITY_PUBLIC",
    "PROGRAM_VISIBILITY_RESTRICTED",
    "PROGRAM_VISIBILITY_PRIVATE",
    "PROGRAM_VISIBILITIES",
    "PROGRAM_STATUS_PENDING",
    "PROGRAM_STATUS_PUBLISHED",
    "PROGRAM_STATUS_CLOSED",
    "PROGRAM_STATUS_COMPLETED",
    "PROGRAM_STATUS_CANCELLED",
    "PROGRAM_STATUSES",
    "PROGRAM_FINAL_STATUSES",
    "PROGRAM_ROLE_SPONSOR",
    "PROGRAM_ROLE_VALIDATOR",
    "PROGRAM_ROLE_BUILDER",
    "PROGRAM_ROLE_TYPES",
    "User",
    "USER_ROLE_USER",
    "USER_ROLE_ADMIN",
    "USER_ROLE_SUPERADMIN",
]
