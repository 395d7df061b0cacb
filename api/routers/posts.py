from __future__ import annotations

from fastapi import APIRouter, Depends, status

from api.db.session import get_sessionmaker
from api.repositories.post_repository import PostRepository
from api.schemas.post import PostPayload, PostRead
from api.services.post_service import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"])


def get_post_service() -> PostService:
    return PostService(PostRepository(get_sessionmaker()))


@router.get("", response_model=list[PostRead])
def list_posts(service: PostService = Depends(get_post_service)):
    return service.list_posts()


@router.get("/{post_id}", response_model=PostRead)
def get_post(post_id: int, service: PostService = Depends(get_post_service)):
    return service.get(post_id)


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post(payload: PostPayload, service: PostService = Depends(get_post_service)):
    return service.create(payload)


@router.put("/{post_id}", response_model=PostRead)
def update_post(post_id: int, payload: PostPayload, service: PostService = Depends(get_post_service)):
    return service.update(post_id, payload)


@router.delete("/{post_id}", response_model=PostRead)
def delete_post(post_id: int, service: PostService = Depends(get_post_service)):
    return service.remove(post_id)
