from fastapi import FastAPI

from app.interfaces.graphql import create_graphql_router

from .health import router as health_router


def register_routes(app: FastAPI) -> None:
    """Register the health check and the GraphQL endpoint on ``app``."""

    app.include_router(health_router)
    app.include_router(create_graphql_router(), prefix="/graphql")
