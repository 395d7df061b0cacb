"""Data access for the posts table backed by SQLAlchemy."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from api.db.models import INTEGER_MAX, INTEGER_MIN, Post

logger = logging.getLogger(__name__)


def _is_storable_id(post_id: int) -> bool:
    return INTEGER_MIN <= post_id <= INTEGER_MAX


class PostRepository:
    """CRUD helpers over ``posts``; every write reads back in its own transaction."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def list_posts(self) -> list[Post]:
        with self._session_factory() as session:
            stmt = select(Post).order_by(Post.post_id)
            return list(session.execute(stmt).scalars().all())

    def get_by_id(self, post_id: int) -> Optional[Post]:
        if not _is_storable_id(post_id):
            return None
        with self._session_factory() as session:
            return session.get(Post, post_id)

    def create(self, user_id: int, post_title: str, post_body: str | None = None) -> Post:
        entity = Post(user_id=user_id, post_title=post_title, post_body=post_body)
        with self._session_factory() as session:
            session.add(entity)
            session.flush()
            session.refresh(entity)
            session.commit()
        logger.info("Created post %s", entity.post_id)
        return entity

    def update(
        self,
        post_id: int,
        *,
        user_id: int,
        post_title: str,
        post_body: str | None = None,
    ) -> Optional[Post]:
        if not _is_storable_id(post_id):
            return None
        with self._session_factory() as session:
            entity = session.get(Post, post_id)
            if entity is None:
                logger.debug("Update skipped, post %s not found", post_id)
                return None
            entity.user_id = user_id
            entity.post_title = post_title
            entity.post_body = post_body
            session.commit()
        logger.info("Updated post %s", post_id)
        return entity

    def remove(self, post_id: int) -> Optional[Post]:
        if not _is_storable_id(post_id):
            return None
        with self._session_factory() as session:
            entity = session.get(Post, post_id)
            if entity is None:
                logger.debug("Delete skipped, post %s not found", post_id)
                return None
            session.delete(entity)
            session.commit()
        logger.info("Deleted post %s", post_id)
        return entity
