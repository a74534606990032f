"""SQLAlchemy model for investments in applications."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class InvestmentModel(Base):
    """Database representation of an investment."""

    __tablename__ = "investment"

    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(
        Integer,
        ForeignKey("application.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    investment_term_id = Column(
        Integer,
        ForeignKey("investment_term.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    amount = Column(String(256), nullable=False)
    tier = Column(String(20), nullable=True)
    tx_hash = Column(String(256), nullable=True)
    status = Column(String(20), nullable=False, default="pending")
    reclaim_tx_hash = Column(String(256), nullable=True)
    reclaimed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )


__all__ = ["InvestmentModel"]
