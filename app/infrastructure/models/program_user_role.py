"""SQLAlchemy model for per-program role assignments."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class ProgramUserRoleModel(Base):
    """Database representation of a user's role inside a program."""

    __tablename__ = "program_user_role"
    __table_args__ = (
        UniqueConstraint(
            "program_id", "user_id", "role_type", name="uq_program_user_role"
        ),
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
    role_type = Column(String(20), nullable=False)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )

    program = relationship("ProgramModel", back_populates="user_roles")


__all__ = ["ProgramUserRoleModel"]
