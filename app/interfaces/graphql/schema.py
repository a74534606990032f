"""Strawberry schema assembled from the per-domain resolvers."""

from __future__ import annotations

from graphql import GraphQLError
from strawberry import Schema
from strawberry.extensions import MaskErrors
from strawberry.tools import merge_types

from app.application.errors import DomainError

from .resolvers import (
    ApplicationMutation,
    ApplicationQuery,
    InvestmentMutation,
    InvestmentQuery,
    NotificationMutation,
    NotificationQuery,
    NotificationSubscription,
    PostMutation,
    PostQuery,
    ProgramMutation,
    ProgramQuery,
    UserMutation,
    UserQuery,
)

Query = merge_types(
    "Query",
    (
        NotificationQuery,
        UserQuery,
        ProgramQuery,
        ApplicationQuery,
        PostQuery,
        InvestmentQuery,
    ),
)
Mutation = merge_types(
    "Mutation",
    (
        NotificationMutation,
        UserMutation,
        ProgramMutation,
        ApplicationMutation,
        PostMutation,
        InvestmentMutation,
    ),
)


def should_mask_error(error: GraphQLError) -> bool:
    """Hide resolver failures that are not :class:`DomainError` instances.

    Errors without an original exception (syntax and validation errors) are
    left untouched.
    """

    original = error.original_error
    return original is not None and not isinstance(original, DomainError)


class MaskInternalErrors(MaskErrors):
    def anonymise_error(self, error: GraphQLError) -> GraphQLError:
        masked = super().anonymise_error(error)
        masked.extensions = {"code": "INTERNAL"}
        return masked


schema = Schema(
    query=Query,
    mutation=Mutation,
    subscription=NotificationSubscription,
    extensions=[
        lambda: MaskInternalErrors(
            should_mask_error=should_mask_error, error_message="Internal server error"
        )
    ],
)


__all__ = ["schema", "should_mask_error"]
