"""SQLAlchemy model for application milestones."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class MilestoneModel(Base):
    """Database representation of a milestone."""

    __tablename__ = "milestone"

    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(
        Integer,
        ForeignKey("application.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title = Column(String(256), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(String(256), nullable=False, default="0")
    currency = Column(String(10), nullable=False, default="ETH")
    status = Column(String(30), nullable=False, default="pending")
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )


__all__ = ["MilestoneModel"]
