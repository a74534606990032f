"""GraphQL interface of the API."""

from .router import create_graphql_router
from .schema import schema

__all__ = ["create_graphql_router", "schema"]
