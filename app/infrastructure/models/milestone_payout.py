"""SQLAlchemy model for payouts released by completed milestones."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class MilestonePayoutModel(Base):
    """Database representation of a milestone payout."""

    __tablename__ = "milestone_payout"

    id = Column(Integer, primary_key=True, index=True)
    milestone_id = Column(
        Integer,
        ForeignKey("milestone.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    investment_id = Column(
        Integer,
        ForeignKey("investment.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount = Column(String(256), nullable=False)
    percentage = Column(String(10), nullable=False)
    status = Column(String(20), nullable=False, default="pending")
    tx_hash = Column(String(256), nullable=True)
    error_message = Column(String(512), nullable=True)
    processed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )


__all__ = ["MilestonePayoutModel"]
