"""Strawberry types exposed by the GraphQL schema."""

from .applications import (
    ApplicationType,
    CreateApplicationInput,
    MilestoneInput,
    MilestoneType,
    PaginatedApplications,
    PaginatedMilestones,
)
from .common import FilterInput, PaginationInput, SortOrder, to_pagination
from .investments import (
    CreateInvestmentInput,
    CreateInvestmentTermInput,
    InvestmentTermType,
    InvestmentType,
    MilestonePayoutType,
    PaginatedInvestments,
    PaginatedInvestmentTerms,
    PaginatedMilestonePayouts,
    UpdateInvestmentTermInput,
    UserTierAssignmentType,
)
from .notifications import NotificationResult, NotificationType
from .posts import (
    CommentType,
    CreateCommentInput,
    CreatePostInput,
    PaginatedComments,
    PaginatedPosts,
    PostType,
    UpdatePostInput,
)
from .programs import (
    AccessDecisionType,
    AssignInvestmentTierInput,
    AssignProgramRoleInput,
    CreateProgramInput,
    PaginatedPrograms,
    ProgramType,
    ProgramUserRoleType,
)
from .users import LoginPayload, UserType

__all__ = [
    "AccessDecisionType",
    "ApplicationType",
    "AssignInvestmentTierInput",
    "AssignProgramRoleInput",
    "CommentType",
    "CreateApplicationInput",
    "CreateCommentInput",
    "CreateInvestmentInput",
    "CreateInvestmentTermInput",
    "CreatePostInput",
    "CreateProgramInput",
    "FilterInput",
    "InvestmentTermType",
    "InvestmentType",
    "LoginPayload",
    "MilestoneInput",
    "MilestonePayoutType",
    "MilestoneType",
    "NotificationResult",
    "NotificationType",
    "PaginatedApplications",
    "PaginatedComments",
    "PaginatedInvestmentTerms",
    "PaginatedInvestments",
    "PaginatedMilestonePayouts",
    "PaginatedMilestones",
    "PaginatedPosts",
    "PaginatedPrograms",
    "PaginationInput",
    "PostType",
    "ProgramType",
    "ProgramUserRoleType",
    "SortOrder",
    "UpdateInvestmentTermInput",
    "UpdatePostInput",
    "UserTierAssignmentType",
    "UserType",
    "to_pagination",
]
