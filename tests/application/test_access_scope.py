"""Tests for scope checks across programs, applications and milestones."""

from __future__ import annotations

import pytest
from sqlalchemy import delete

from app.application.errors import EntityNotFoundError, ForbiddenError
from app.application.use_cases.access import (
    Scope,
    ScopeCheck,
    check_scope,
    is_in_same_scope,
    require_scope,
)
from app.application.use_cases.applications import create_application
from app.application.use_cases.milestones import MilestoneDraft, create_milestones
from app.application.use_cases.programs import create_program
from app.infrastructure.models import ApplicationModel, ProgramModel


@pytest.fixture()
def chain(session, people):
    program = create_program(
        session,
        creator_id=people["creator"].id,
        name="Grants round",
        validator_id=people["validator"].id,
    )
    application = create_application(
        session,
        program_id=program.id,
        applicant_id=people["builder"].id,
        name="Indexer",
    )
    (milestone,) = create_milestones(
        session,
        application_id=application.id,
        user_id=people["builder"].id,
        milestones=[MilestoneDraft(title="Prototype")],
    )
    return {"program": program, "application": application, "milestone": milestone}


@pytest.mark.parametrize(
    ("scope", "entity", "owner"),
    [
        (Scope.PROGRAM_CREATOR, "program", "creator"),
        (Scope.PROGRAM_VALIDATOR, "program", "validator"),
        (Scope.APPLICATION_BUILDER, "application", "builder"),
        (Scope.APPLICATION_VALIDATOR, "application", "validator"),
        (Scope.MILESTONE_BUILDER, "milestone", "builder"),
        (Scope.MILESTONE_VALIDATOR, "milestone", "validator"),
    ],
)
def test_only_the_owner_is_in_scope(session, people, chain, scope, entity, owner):
    entity_id = chain[entity].id

    for name, user in people.items():
        expected = name == owner
        assert (
            is_in_same_scope(session, scope=scope, user_id=user.id, entity_id=entity_id)
            is expected
        ), name


def test_scope_accepts_plain_tags(session, people, chain):
    assert is_in_same_scope(
        session,
        scope="program_creator",
        user_id=people["creator"].id,
        entity_id=chain["program"].id,
    )


def test_unknown_scope_tag_raises(session, people, chain):
    with pytest.raises(ValueError):
        is_in_same_scope(
            session,
            scope="program_owner",
            user_id=people["creator"].id,
            entity_id=chain["program"].id,
        )


@pytest.mark.parametrize("scope", list(Scope))
def test_missing_entity_is_never_in_scope(session, people, scope):
    user_id = people["creator"].id

    assert check_scope(session, scope=scope, user_id=user_id, entity_id=999) is ScopeCheck.NOT_FOUND
    assert is_in_same_scope(session, scope=scope, user_id=user_id, entity_id=999) is False


def test_require_scope_distinguishes_missing_from_forbidden(session, people, chain):
    with pytest.raises(EntityNotFoundError, match="Application not found"):
        require_scope(
            session,
            scope=Scope.APPLICATION_VALIDATOR,
            user_id=people["validator"].id,
            entity_id=999,
            entity="Application",
            message="nope",
        )

    with pytest.raises(ForbiddenError, match="nope"):
        require_scope(
            session,
            scope=Scope.APPLICATION_VALIDATOR,
            user_id=people["builder"].id,
            entity_id=chain["application"].id,
            entity="Application",
            message="nope",
        )


def test_program_without_validator_grants_no_validator_scope(session, people):
    program = create_program(session, creator_id=people["creator"].id, name="Solo")

    assert (
        check_scope(
            session,
            scope=Scope.PROGRAM_VALIDATOR,
            user_id=people["validator"].id,
            entity_id=program.id,
        )
        is ScopeCheck.DENIED
    )


@pytest.mark.parametrize(
    ("scope", "entity", "owner", "removed"),
    [
        (Scope.APPLICATION_BUILDER, "application", "builder", "program"),
        (Scope.APPLICATION_VALIDATOR, "application", "validator", "program"),
        (Scope.MILESTONE_BUILDER, "milestone", "builder", "application"),
        (Scope.MILESTONE_BUILDER, "milestone", "builder", "program"),
        (Scope.MILESTONE_VALIDATOR, "milestone", "validator", "application"),
        (Scope.MILESTONE_VALIDATOR, "milestone", "validator", "program"),
    ],
)
def test_missing_parent_row_is_never_in_scope(
    session, people, chain, scope, entity, owner, removed
):
    model = {"program": ProgramModel, "application": ApplicationModel}[removed]
    # SQLite leaves the child rows in place, so only the middle of the chain is gone.
    session.execute(delete(model).where(model.id == chain[removed].id))
    session.commit()
    user_id = people[owner].id
    entity_id = chain[entity].id

    assert (
        check_scope(session, scope=scope, user_id=user_id, entity_id=entity_id)
        is ScopeCheck.NOT_FOUND
    )
    assert is_in_same_scope(session, scope=scope, user_id=user_id, entity_id=entity_id) is False
