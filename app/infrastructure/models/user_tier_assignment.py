"""SQLAlchemy model for per-program investment tiers."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class UserTierAssignmentModel(Base):
    """Database representation of a supporter's tier inside a program."""

    __tablename__ = "user_tier_assignment"
    __table_args__ = (
        UniqueConstraint("program_id", "user_id", name="uq_user_tier_assignment"),
    )

    id = Column(Integer, primary_key=True, index=True)
    program_id = Column(
        Integer,
        ForeignKey("program.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tier = Column(String(20), nullable=False)
    max_investment_amount = Column(String(256), nullable=False)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )


__all__ = ["UserTierAssignmentModel"]
