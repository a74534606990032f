"""SQLAlchemy model for comments on posts, programs, applications and milestones."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text

from app.infrastructure.database import Base
from app.utils import now_in_app_timezone


class CommentModel(Base):
    """Database representation of a comment."""

    __tablename__ = "comment"
    __table_args__ = (
        Index("ix_comment_commentable", "commentable_type", "commentable_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Polymorphic target, so no foreign key.
    commentable_type = Column(String(20), nullable=False)
    commentable_id = Column(Integer, nullable=False)
    parent_id = Column(
        Integer,
        ForeignKey("comment.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    content = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=now_in_app_timezone
    )
    updated_at = Column(
        DateTime(timezone=True), nullable=True, onupdate=now_in_app_timezone
    )


__all__ = ["CommentModel"]
