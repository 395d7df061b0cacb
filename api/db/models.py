"""SQLAlchemy model for the posts table."""
from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from .session import Base

# 32-bit INTEGER range, the narrowest of the supported backends
INTEGER_MIN = -(2**31)
INTEGER_MAX = 2**31 - 1


class Post(Base):
    __tablename__ = "posts"
    # sqlite_autoincrement keeps deleted ids from being handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    post_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False)
    post_title = Column(Text, nullable=False)
    post_body = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Post(post_id={self.post_id}, user_id={self.user_id}, post_title={self.post_title!r})>"
