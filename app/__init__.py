"""Ludium Portal API package.

Domain entities live in ``app.domain``, use cases in ``app.application``,
persistence and realtime plumbing in ``app.infrastructure`` and the GraphQL
surface in ``app.interfaces``.
"""
