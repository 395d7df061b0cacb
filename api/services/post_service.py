"""Post use cases sitting between the HTTP router and the repository."""

from __future__ import annotations

from api.db.models import Post
from api.repositories.post_repository import PostRepository
from api.schemas.post import PostPayload


class PostError(Exception):
    """Base exception for post workflow."""


class PostNotFoundError(PostError):
    """Raised when no post matches the requested identifier."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post {post_id} not found")
        self.post_id = post_id


class PostService:
    """Turns absent repository results into PostNotFoundError."""

    def __init__(self, repository: PostRepository) -> None:
        self.repository = repository

    def list_posts(self) -> list[Post]:
        return self.repository.list_posts()

    def get(self, post_id: int) -> Post:
        entity = self.repository.get_by_id(post_id)
        if entity is None:
            raise PostNotFoundError(post_id)
        return entity

    def create(self, payload: PostPayload) -> Post:
        return self.repository.create(payload.user_id, payload.post_title, payload.post_body)

    def update(self, post_id: int, payload: PostPayload) -> Post:
        entity = self.repository.update(
            post_id,
            user_id=payload.user_id,
            post_title=payload.post_title,
            post_body=payload.post_body,
        )
        if entity is None:
            raise PostNotFoundError(post_id)
        return entity

    def remove(self, post_id: int) -> Post:
        entity = self.repository.remove(post_id)
        if entity is None:
            raise PostNotFoundError(post_id)
        return entity
