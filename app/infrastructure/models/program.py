"""SQLAlchemy model for sponsor programs."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class ProgramModel(Base):
    """Database representation of a program."""

    __tablename__ = "program"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(256), nullable=False)
    summary = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    price = Column(String(256), nullable=False, default="0")
    currency = Column(String(10), nullable=False, default="ETH")
    deadline = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(20), nullable=False, default="pending")
    visibility = Column(String(20), nullable=False, default="public", index=True)
    creator_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    validator_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )

    user_roles = relationship(
        "ProgramUserRoleModel",
        back_populates="program",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


__all__ = ["ProgramModel"]
