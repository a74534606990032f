"""Utility helpers to generate and dispatch domain notifications."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.errors import ServiceError
from app.domain.entities import (
    NOTIFICATION_ACTIONS,
    NOTIFICATION_TYPES,
    RECLAIM_REASON,
    Application,
    Comment,
    Investment,
    Milestone,
    NotificationDraft,
    Program,
    UserTierAssignment,
)
from app.infrastructure.notifications import (
    NOTIFICATIONS_CHANNEL,
    NOTIFICATIONS_COUNT_CHANNEL,
    notification_publisher,
)

logger = logging.getLogger(__name__)


def broadcast_notification_refresh(
    recipient_id: int, notification_id: int | None = None
) -> None:
    """Signal both notification channels of ``recipient_id``."""

    notification_publisher.broadcast(NOTIFICATIONS_CHANNEL, recipient_id, notification_id)
    notification_publisher.broadcast(NOTIFICATIONS_COUNT_CHANNEL, recipient_id, notification_id)


def send_notification(
    session: Session,
    *,
    recipient_id: int,
    type: str,
    action: str,
    entity_id: int | str,
    title: str | None = None,
    content: str | None = None,
    metadata: dict[str, Any] | None = None,
) -> int:
    """Persist a notification, then signal the recipient's subscriptions."""

    if type not in NOTIFICATION_TYPES or action not in NOTIFICATION_ACTIONS:
        raise ValueError(f"Unsupported notification kind: {type}/{action}")
    draft = NotificationDraft(
        recipient_id=recipient_id,
        type=type,
        action=action,
        entity_id=str(entity_id),
        title=title,
        content=content,
        metadata=metadata,
    )
    try:
        notification_id = notification_publisher.record(session, draft)
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("create_notification failed for user %s", recipient_id)
        raise ServiceError("Failed to create notification") from exc
    broadcast_notification_refresh(recipient_id, notification_id)
    return notification_id


def notify_program_invited(
    session: Session, program: Program, *, user_id: int, role_type: str
) -> int:
    return send_notification(
        session,
        recipient_id=user_id,
        type="program",
        action="invited",
        entity_id=program.id,
        title="Program invitation",
        content=f"You have been invited to {program.name} as {role_type}",
        metadata={"programId": str(program.id), "roleType": role_type},
    )


def notify_investment_tier(
    session: Session, program: Program, assignment: UserTierAssignment
) -> int:
    """Invite a supporter to invest; the ``tier`` key feeds the investment tab."""

    return send_notification(
        session,
        recipient_id=assignment.user_id,
        type="program",
        action="invited",
        entity_id=program.id,
        title="Investment tier assigned",
        content=f"You can invest in {program.name} as a {assignment.tier} supporter",
        metadata={
            "programId": str(program.id),
            "tier": assignment.tier,
            "maxInvestmentAmount": assignment.max_investment_amount,
        },
    )


def notify_program_completed(session: Session, program: Program, *, reason: str) -> int:
    metadata: dict[str, Any] = {"programId": str(program.id)}
    if reason == RECLAIM_REASON:
        metadata["reason"] = RECLAIM_REASON
    return send_notification(
        session,
        recipient_id=program.creator_id,
        type="program",
        action="completed",
        entity_id=program.id,
        title="Program completed",
        content=f"{program.name} has been completed",
        metadata=metadata,
    )


def notify_application_created(
    session: Session, application: Application, *, validator_id: int
) -> int:
    return send_notification(
        session,
        recipient_id=validator_id,
        type="application",
        action="created",
        entity_id=application.id,
        title="New application",
        content=f"{application.name} was submitted for review",
        metadata={"programId": str(application.program_id)},
    )


def notify_application_reviewed(session: Session, application: Application) -> int:
    return send_notification(
        session,
        recipient_id=application.applicant_id,
        type="application",
        action=application.status,
        entity_id=application.id,
        title=f"Application {application.status}",
        content=application.rejection_reason,
        metadata={"programId": str(application.program_id)},
    )


def notify_milestones(
    session: Session,
    milestones: list[Milestone],
    *,
    validator_id: int,
    action: str,
) -> list[int]:
    return [
        send_notification(
            session,
            recipient_id=validator_id,
            type="milestone",
            action=action,
            entity_id=milestone.id,
            title=f"Milestone {action}",
            content=milestone.title,
            metadata={"applicationId": str(milestone.application_id)},
        )
        for milestone in milestones
    ]


def notify_milestone_reviewed(
    session: Session, milestone: Milestone, *, applicant_id: int, action: str
) -> int:
    return send_notification(
        session,
        recipient_id=applicant_id,
        type="milestone",
        action=action,
        entity_id=milestone.id,
        title=f"Milestone {action}",
        content=milestone.title,
        metadata={"applicationId": str(milestone.application_id)},
    )


def notify_comment_created(
    session: Session, comment: Comment, *, recipient_ids: list[int]
) -> list[int]:
    """Tell ``recipient_ids`` about a new comment; the author is never notified."""

    recipients = [
        recipient_id
        for recipient_id in dict.fromkeys(recipient_ids)
        if recipient_id != comment.author_id
    ]
    return [
        send_notification(
            session,
            recipient_id=recipient_id,
            type="comment",
            action="created",
            entity_id=comment.id,
            title="New comment",
            content=comment.content,
            metadata={
                "commentableType": comment.commentable_type,
                "commentableId": str(comment.commentable_id),
                **({"parentId": str(comment.parent_id)} if comment.parent_id else {}),
            },
        )
        for recipient_id in recipients
    ]


def notify_investment_received(
    session: Session, investment: Investment, *, applicant_id: int, investor_email: str
) -> int:
    return send_notification(
        session,
        recipient_id=applicant_id,
        type="application",
        action="created",
        entity_id=investment.application_id,
        title="New investment",
        metadata={
            "investmentId": str(investment.id),
            "amount": investment.amount,
            "investor": investor_email,
        },
    )


def notify_investment_refunded(
    session: Session, investment: Investment, *, applicant_id: int
) -> int:
    return send_notification(
        session,
        recipient_id=applicant_id,
        type="application",
        action="completed",
        entity_id=investment.application_id,
        title="Investment reclaimed",
        metadata={
            "investmentId": str(investment.id),
            "amount": investment.amount,
            "action": "refunded",
            "reason": RECLAIM_REASON,
        },
    )


__all__ = [
    "broadcast_notification_refresh",
    "notify_application_created",
    "notify_application_reviewed",
    "notify_comment_created",
    "notify_investment_received",
    "notify_investment_refunded",
    "notify_investment_tier",
    "notify_milestone_reviewed",
    "notify_milestones",
    "notify_program_completed",
    "notify_program_invited",
    "send_notification",
]
