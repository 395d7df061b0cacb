"""Demonstration rows for the posts table."""
from __future__ import annotations

import logging

from sqlalchemy import delete
from sqlalchemy.orm import sessionmaker

from .models import Post

logger = logging.getLogger(__name__)

SEED_POSTS: list[dict] = [
    {"user_id": 1, "post_title": "test post 1", "post_body": "Test post body 1"},
    {"user_id": 1, "post_title": "test post 2", "post_body": "Test post body 2"},
    {"user_id": 2, "post_title": "test post 3", "post_body": "Test post body 3"},
    {"user_id": 2, "post_title": "test post 4", "post_body": "Test post body 4"},
    {"user_id": 3, "post_title": "test post 5", "post_body": None},
]


def seed_posts(session_factory: sessionmaker) -> int:
    """Delete every existing post and insert the fixed seed rows.

    Returns the number of rows inserted.
    """
    with session_factory() as session:
        session.execute(delete(Post))
        session.add_all(Post(**row) for row in SEED_POSTS)
        session.commit()
    logger.info("Seeded %d posts", len(SEED_POSTS))
    return len(SEED_POSTS)
