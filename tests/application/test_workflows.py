"""Tests for the program, application and milestone workflows."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app.application.errors import (
    EntityNotFoundError,
    ForbiddenError,
    InvalidFilterError,
    InvalidInputError,
)
from app.application.use_cases.applications import (
    accept_application,
    create_application,
    list_applications,
    reject_application,
)
from app.application.use_cases.milestones import (
    MilestoneDraft,
    check_milestone,
    create_milestones,
    list_milestones,
    submit_milestone,
)
from app.application.use_cases.notifications import list_notifications
from app.application.use_cases.pagination import FieldFilter, Pagination
from app.application.use_cases.programs import (
    assign_program_role,
    check_program_completion,
    create_program,
    get_program,
    list_programs,
)
from app.application.use_cases.users import get_user, login
from app.infrastructure.repositories import ApplicationRepository
from app.infrastructure.security import decode_access_token, extract_user_id
from app.utils import now_in_app_timezone


def _inbox(session, user, *filters):
    pagination = Pagination.build(
        limit=100, filters=[FieldFilter(field, value) for field, value in filters]
    )
    return list_notifications(session, recipient_id=user.id, pagination=pagination)


@pytest.fixture()
def program(session, people):
    return create_program(
        session,
        creator_id=people["creator"].id,
        name="Public goods",
        validator_id=people["validator"].id,
    )


@pytest.fixture()
def application(session, people, program):
    return create_application(
        session, program_id=program.id, applicant_id=people["builder"].id, name="Wallet"
    )


def test_login_returns_token_for_registered_email(session, people):
    token, user = login(session, email="Builder@Example.com", external_id="did:privy:1")

    assert user.id == people["builder"].id
    assert user.external_id == "did:privy:1"
    assert extract_user_id(decode_access_token(token)) == user.id


def test_login_unknown_email(session):
    with pytest.raises(EntityNotFoundError, match="User not found"):
        login(session, email="ghost@example.com", external_id="x")


def test_get_user(session, people):
    assert get_user(session, people["creator"].id).email == "creator@example.com"
    with pytest.raises(EntityNotFoundError, match="User not found"):
        get_user(session, 999)


def test_create_program_registers_validator_role(session, people, program):
    assert program.validator_id == people["validator"].id
    assert program.status == "pending"
    assert get_program(session, program.id, user_id=None).name == "Public goods"


def test_create_program_rejects_unknown_visibility(session, people):
    with pytest.raises(InvalidInputError):
        create_program(session, creator_id=people["creator"].id, name="x", visibility="secret")


def test_get_private_program_requires_access(session, people):
    private = create_program(
        session, creator_id=people["creator"].id, name="Closed", visibility="private"
    )

    with pytest.raises(ForbiddenError):
        get_program(session, private.id, user_id=people["outsider"].id)
    with pytest.raises(EntityNotFoundError):
        get_program(session, 999, user_id=people["outsider"].id)


def test_list_programs_hides_private_programs_from_outsiders(session, people, program):
    private = create_program(
        session, creator_id=people["creator"].id, name="Closed", visibility="private"
    )

    outsider_view = list_programs(session, viewer_id=people["outsider"].id)
    creator_view = list_programs(session, viewer_id=people["creator"].id)
    anonymous_view = list_programs(session)

    assert {item.id for item in outsider_view.data} == {program.id}
    assert {item.id for item in creator_view.data} == {program.id, private.id}
    assert anonymous_view.count == 1


def test_list_programs_filters(session, people, program):
    create_program(session, creator_id=people["outsider"].id, name="Other")
    pagination = Pagination.build(
        filters=[FieldFilter("creatorId", str(people["creator"].id))]
    )

    page = list_programs(session, pagination=pagination)

    assert [item.id for item in page.data] == [program.id]
    with pytest.raises(InvalidFilterError):
        list_programs(session, pagination=Pagination.build(filters=[FieldFilter("name", "x")]))


def test_assign_program_role_is_idempotent_and_invites_once(session, people, program):
    first = assign_program_role(
        session,
        program_id=program.id,
        user_id=people["builder"].id,
        role_type="builder",
        assigned_by=people["creator"].id,
    )
    second = assign_program_role(
        session,
        program_id=program.id,
        user_id=people["builder"].id,
        role_type="builder",
        assigned_by=people["creator"].id,
    )

    assert first.id == second.id
    invitations = _inbox(session, people["builder"])
    assert invitations.count == 1
    assert invitations.data[0].metadata["roleType"] == "builder"
    assert _inbox(session, people["builder"], ("tab", "investment_condition")).count == 0


def test_only_the_creator_assigns_roles(session, people, program):
    with pytest.raises(ForbiddenError):
        assign_program_role(
            session,
            program_id=program.id,
            user_id=people["builder"].id,
            role_type="builder",
            assigned_by=people["validator"].id,
        )
    with pytest.raises(InvalidInputError):
        assign_program_role(
            session,
            program_id=program.id,
            user_id=people["builder"].id,
            role_type="owner",
            assigned_by=people["creator"].id,
        )


def test_application_notifies_validator(session, people, application):
    inbox = _inbox(session, people["validator"])

    assert application.status == "pending"
    assert [(item.type, item.action) for item in inbox.data] == [("application", "created")]
    assert inbox.data[0].entity_id == str(application.id)


def test_creator_cannot_apply(session, people, program):
    with pytest.raises(ForbiddenError, match="Program creators cannot apply"):
        create_application(
            session, program_id=program.id, applicant_id=people["creator"].id, name="Self"
        )


def test_accept_application_notifies_applicant(session, people, program, application):
    accepted = accept_application(
        session, application_id=application.id, user_id=people["validator"].id
    )

    assert accepted.status == "accepted"
    progress = _inbox(session, people["builder"], ("tab", "progress"))
    assert progress.count == 1
    assert progress.data[0].action == "accepted"
    assert progress.data[0].metadata == {"programId": str(program.id)}

    with pytest.raises(InvalidInputError):
        accept_application(session, application_id=application.id, user_id=people["validator"].id)


def test_only_the_validator_reviews_applications(session, people, application):
    with pytest.raises(ForbiddenError):
        accept_application(session, application_id=application.id, user_id=people["creator"].id)
    with pytest.raises(EntityNotFoundError):
        accept_application(session, application_id=999, user_id=people["validator"].id)


def test_reject_application_records_reason(session, people, application):
    rejected = reject_application(
        session,
        application_id=application.id,
        user_id=people["validator"].id,
        reason="Out of scope",
    )

    assert rejected.status == "rejected"
    assert rejected.rejection_reason == "Out of scope"


def test_list_applications_filters(session, people, program, application):
    pagination = Pagination.build(filters=[FieldFilter("programId", str(program.id))])

    page = list_applications(session, viewer_id=people["outsider"].id, pagination=pagination)

    assert [item.id for item in page.data] == [application.id]
    with pytest.raises(InvalidFilterError):
        list_applications(
            session, pagination=Pagination.build(filters=[FieldFilter("status", "lost")])
        )


def test_milestone_lifecycle_completes_application(session, people, application):
    builder, validator = people["builder"], people["validator"]
    first, second = create_milestones(
        session,
        application_id=application.id,
        user_id=builder.id,
        milestones=[MilestoneDraft(title="Design"), MilestoneDraft(title="Launch", price="10")],
    )
    assert _inbox(session, validator, ("tab", "progress")).count == 3

    for milestone in (first, second):
        submitted = submit_milestone(session, milestone_id=milestone.id, user_id=builder.id)
        assert submitted.status == "submitted"
        checked = check_milestone(
            session, milestone_id=milestone.id, user_id=validator.id, status="completed"
        )
        assert checked.status == "completed"

    assert ApplicationRepository(session).get(application.id).status == "completed"
    page = list_milestones(
        session,
        pagination=Pagination.build(filters=[FieldFilter("applicationId", str(application.id))]),
    )
    assert page.count == 2


def test_revision_request_notifies_builder(session, people, application):
    builder, validator = people["builder"], people["validator"]
    (milestone,) = create_milestones(
        session,
        application_id=application.id,
        user_id=builder.id,
        milestones=[MilestoneDraft(title="Design")],
    )

    with pytest.raises(InvalidInputError):
        check_milestone(
            session, milestone_id=milestone.id, user_id=validator.id, status="completed"
        )

    submit_milestone(session, milestone_id=milestone.id, user_id=builder.id)
    checked = check_milestone(
        session, milestone_id=milestone.id, user_id=validator.id, status="revision_requested"
    )

    assert checked.status == "revision_requested"
    actions = [(item.type, item.action) for item in _inbox(session, builder).data]
    assert ("milestone", "rejected") in actions
    assert ApplicationRepository(session).get(application.id).status == "pending"


def test_only_the_applicant_manages_milestones(session, people, application):
    with pytest.raises(ForbiddenError):
        create_milestones(
            session,
            application_id=application.id,
            user_id=people["outsider"].id,
            milestones=[MilestoneDraft(title="Steal")],
        )
    with pytest.raises(InvalidInputError):
        create_milestones(
            session, application_id=application.id, user_id=people["builder"].id, milestones=[]
        )


def test_deadline_completion_creates_reclaim_notification(session, people):
    expired = create_program(
        session,
        creator_id=people["creator"].id,
        name="Expired",
        deadline=now_in_app_timezone() - timedelta(days=1),
    )

    completed = check_program_completion(
        session, program_id=expired.id, user_id=people["creator"].id
    )

    assert completed.status == "completed"
    reclaim = _inbox(session, people["creator"], ("tab", "reclaim"))
    assert reclaim.count == 1
    assert reclaim.data[0].entity_id == str(expired.id)

    again = check_program_completion(session, program_id=expired.id, user_id=people["creator"].id)
    assert again.status == "completed"
    assert _inbox(session, people["creator"], ("tab", "reclaim")).count == 1


def test_running_program_is_not_completed(session, people, program, application):
    result = check_program_completion(
        session, program_id=program.id, user_id=people["creator"].id
    )

    assert result.status == "pending"
    with pytest.raises(ForbiddenError):
        check_program_completion(session, program_id=program.id, user_id=people["builder"].id)
