"""Tests for investment tiers, terms, investments, reclaims and payouts."""

from __future__ import annotations

from datetime import timedelta

import pytest
from sqlalchemy import update

from app.application.errors import (
    EntityNotFoundError,
    ForbiddenError,
    InvalidFilterError,
    InvalidInputError,
)
from app.application.use_cases.applications import accept_application, create_application
from app.application.use_cases.investments import (
    create_investment,
    create_investment_term,
    delete_investment_term,
    list_investment_terms,
    list_investments,
    reclaim_investment,
    update_investment_term,
)
from app.application.use_cases.milestones import (
    MilestoneDraft,
    check_milestone,
    create_milestones,
    submit_milestone,
)
from app.application.use_cases.notifications import list_notifications
from app.application.use_cases.pagination import FieldFilter, Pagination
from app.application.use_cases.payouts import list_milestone_payouts, process_milestone_payouts
from app.application.use_cases.programs import assign_investment_tier, create_program
from app.infrastructure.models import ProgramModel
from app.utils import now_in_app_timezone


def _inbox(session, user, *filters):
    pagination = Pagination.build(
        limit=100, filters=[FieldFilter(field, value) for field, value in filters]
    )
    return list_notifications(session, recipient_id=user.id, pagination=pagination)


def _filtered(field, value):
    return Pagination.build(filters=[FieldFilter(field, value)])


@pytest.fixture()
def program(session, people):
    return create_program(
        session,
        creator_id=people["creator"].id,
        name="Funding round",
        validator_id=people["validator"].id,
        deadline=now_in_app_timezone() + timedelta(days=30),
    )


@pytest.fixture()
def application(session, people, program):
    created = create_application(
        session, program_id=program.id, applicant_id=people["builder"].id, name="Wallet"
    )
    return accept_application(
        session, application_id=created.id, user_id=people["validator"].id
    )


def _expire(session, program):
    session.execute(
        update(ProgramModel)
        .where(ProgramModel.id == program.id)
        .values(deadline=now_in_app_timezone() - timedelta(days=1))
    )
    session.commit()


def test_assign_investment_tier_invites_once(session, people, program):
    for _ in range(2):
        assignment = assign_investment_tier(
            session,
            program_id=program.id,
            user_id=people["outsider"].id,
            tier="gold",
            max_investment_amount="100.0",
            assigned_by=people["creator"].id,
        )

    assert assignment.tier == "gold"
    assert assignment.max_investment_amount == "100"
    invitations = _inbox(session, people["outsider"], ("tab", "investment_condition"))
    assert invitations.count == 1
    assert invitations.data[0].metadata["tier"] == "gold"
    assert invitations.data[0].metadata["maxInvestmentAmount"] == "100"


def test_assign_investment_tier_validation(session, people, program):
    with pytest.raises(InvalidInputError, match="Unsupported investment tier"):
        assign_investment_tier(
            session,
            program_id=program.id,
            user_id=people["outsider"].id,
            tier="diamond",
            max_investment_amount="10",
            assigned_by=people["creator"].id,
        )
    with pytest.raises(ForbiddenError):
        assign_investment_tier(
            session,
            program_id=program.id,
            user_id=people["outsider"].id,
            tier="gold",
            max_investment_amount="10",
            assigned_by=people["validator"].id,
        )
    with pytest.raises(EntityNotFoundError, match="User not found"):
        assign_investment_tier(
            session,
            program_id=program.id,
            user_id=999,
            tier="gold",
            max_investment_amount="10",
            assigned_by=people["creator"].id,
        )


def test_investment_notifies_applicant(session, people, application):
    investment = create_investment(
        session,
        application_id=application.id,
        user_id=people["outsider"].id,
        amount="25.50",
        tx_hash="0xabc",
    )

    assert investment.status == "confirmed"
    assert investment.amount == "25.5"
    received = [
        item for item in _inbox(session, people["builder"]).data if item.title == "New investment"
    ]
    assert len(received) == 1
    assert (received[0].type, received[0].action) == ("application", "created")
    assert received[0].metadata["investmentId"] == str(investment.id)
    assert received[0].metadata["investor"] == "outsider@example.com"


def test_investment_without_transaction_is_pending(session, people, application):
    investment = create_investment(
        session, application_id=application.id, user_id=people["outsider"].id, amount="1"
    )

    assert investment.status == "pending"
    assert investment.tier is None


def test_only_accepted_applications_receive_investments(session, people, program):
    pending = create_application(
        session, program_id=program.id, applicant_id=people["builder"].id, name="Draft"
    )

    with pytest.raises(InvalidInputError, match="Only accepted applications"):
        create_investment(
            session, application_id=pending.id, user_id=people["outsider"].id, amount="1"
        )


def test_investment_rejections(session, people, application):
    with pytest.raises(ForbiddenError):
        create_investment(
            session, application_id=application.id, user_id=people["builder"].id, amount="1"
        )
    with pytest.raises(InvalidInputError, match="amount must be a positive number"):
        create_investment(
            session, application_id=application.id, user_id=people["outsider"].id, amount="-3"
        )
    with pytest.raises(EntityNotFoundError, match="Application not found"):
        create_investment(session, application_id=999, user_id=people["outsider"].id, amount="1")


def test_tier_cap_limits_total_investment(session, people, program, application):
    assign_investment_tier(
        session,
        program_id=program.id,
        user_id=people["outsider"].id,
        tier="silver",
        max_investment_amount="100",
        assigned_by=people["creator"].id,
    )

    first = create_investment(
        session, application_id=application.id, user_id=people["outsider"].id, amount="60"
    )
    assert first.tier == "silver"
    with pytest.raises(InvalidInputError, match="tier limit of 100"):
        create_investment(
            session, application_id=application.id, user_id=people["outsider"].id, amount="50"
        )


def test_term_purchase_limit(session, people, application, make_user):
    term = create_investment_term(
        session,
        application_id=application.id,
        user_id=people["builder"].id,
        title="Early bird",
        price="10",
        purchase_limit=1,
    )
    create_investment(
        session,
        application_id=application.id,
        user_id=people["outsider"].id,
        amount="10",
        investment_term_id=term.id,
    )

    with pytest.raises(InvalidInputError, match="purchase limit of 1"):
        create_investment(
            session,
            application_id=application.id,
            user_id=make_user().id,
            amount="10",
            investment_term_id=term.id,
        )


def test_investment_term_management(session, people, application):
    builder = people["builder"]
    with pytest.raises(ForbiddenError):
        create_investment_term(
            session,
            application_id=application.id,
            user_id=people["outsider"].id,
            title="Stolen",
            price="1",
        )
    term = create_investment_term(
        session, application_id=application.id, user_id=builder.id, title="Seed", price="5"
    )

    updated = update_investment_term(session, term_id=term.id, user_id=builder.id, price="7.50")
    assert updated.price == "7.5"
    assert updated.title == "Seed"

    page = list_investment_terms(session, pagination=_filtered("applicationId", str(application.id)))
    assert [item.id for item in page.data] == [term.id]

    assert delete_investment_term(session, term_id=term.id, user_id=builder.id) is True
    with pytest.raises(EntityNotFoundError, match="Investment term not found"):
        update_investment_term(session, term_id=term.id, user_id=builder.id, title="Gone")


def test_reclaim_after_deadline(session, people, program, application):
    investor = people["outsider"]
    investment = create_investment(
        session, application_id=application.id, user_id=investor.id, amount="5", tx_hash="0x1"
    )

    with pytest.raises(InvalidInputError, match="not eligible"):
        reclaim_investment(session, investment_id=investment.id, user_id=investor.id)

    _expire(session, program)
    with pytest.raises(ForbiddenError):
        reclaim_investment(session, investment_id=investment.id, user_id=people["builder"].id)
    refunded = reclaim_investment(
        session, investment_id=investment.id, user_id=investor.id, tx_hash="0x2"
    )

    assert refunded.status == "refunded"
    assert refunded.reclaim_tx_hash == "0x2"
    assert refunded.reclaimed_at is not None
    actions = [(item.type, item.action) for item in _inbox(session, people["builder"]).data]
    assert ("application", "completed") in actions
    with pytest.raises(InvalidInputError, match="already refunded"):
        reclaim_investment(session, investment_id=investment.id, user_id=investor.id)


def test_pending_investment_cannot_be_reclaimed(session, people, program, application):
    investment = create_investment(
        session, application_id=application.id, user_id=people["outsider"].id, amount="5"
    )
    _expire(session, program)

    with pytest.raises(InvalidInputError, match="Only confirmed investments"):
        reclaim_investment(session, investment_id=investment.id, user_id=people["outsider"].id)


def test_list_investments_filters(session, people, application):
    investment = create_investment(
        session, application_id=application.id, user_id=people["outsider"].id, amount="3"
    )

    page = list_investments(session, pagination=_filtered("status", "pending"))
    assert [item.id for item in page.data] == [investment.id]
    assert list_investments(session, pagination=_filtered("status", "confirmed")).count == 0
    with pytest.raises(InvalidFilterError):
        list_investments(session, pagination=_filtered("status", "lost"))


def test_completed_milestone_creates_payouts(session, people, application):
    builder, validator = people["builder"], people["validator"]
    investment = create_investment(
        session,
        application_id=application.id,
        user_id=people["outsider"].id,
        amount="100",
        tx_hash="0xabc",
    )
    first, _second = create_milestones(
        session,
        application_id=application.id,
        user_id=builder.id,
        milestones=[
            MilestoneDraft(title="Design", price="30"),
            MilestoneDraft(title="Launch", price="70"),
        ],
    )
    submit_milestone(session, milestone_id=first.id, user_id=builder.id)
    check_milestone(session, milestone_id=first.id, user_id=validator.id, status="completed")

    page = list_milestone_payouts(session, pagination=_filtered("milestoneId", str(first.id)))
    assert page.count == 1
    payout = page.data[0]
    assert payout.investment_id == investment.id
    assert (payout.amount, payout.percentage, payout.status) == ("30", "30", "pending")

    with pytest.raises(ForbiddenError):
        process_milestone_payouts(session, milestone_id=first.id, user_id=builder.id)
    processed = process_milestone_payouts(session, milestone_id=first.id, user_id=validator.id)
    assert [item.status for item in processed] == ["processing"]
    with pytest.raises(InvalidInputError, match="No pending payouts"):
        process_milestone_payouts(session, milestone_id=first.id, user_id=validator.id)


def test_milestone_price_must_be_numeric(session, people, application):
    with pytest.raises(InvalidInputError, match="price must be a non-negative number"):
        create_milestones(
            session,
            application_id=application.id,
            user_id=people["builder"].id,
            milestones=[MilestoneDraft(title="Design", price="ten")],
        )
