from typing import Any, List
import logging

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blogapi.core.config import settings
from blogapi.core.permissions import ensure_owner
from blogapi.core.schemas import Message
from blogapi.db.session import get_db
from blogapi.deps import get_current_user_id
from blogapi.modules.posts.schemas.post import (
    Post as PostSchema, PostCreate, PostUpdate, PostWithAuthor, PostPage
)
from blogapi.modules.posts.services.post import (
    get_post, get_post_with_author, get_posts_page, get_user_posts,
    create_post, update_post, delete_post
)

logger = logging.getLogger("blogapi")

router = APIRouter()

def _internal_error(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )

@router.get("", response_model=PostPage)
def read_posts(
    db: Session = Depends(get_db),
    page: int = Query(1, ge=1, le=settings.MAX_PAGE),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, alias="pageSize"),
) -> Any:
    """
    Retrieve one page of posts, newest first.
    """
    try:
        return get_posts_page(db, page=page, page_size=page_size)
    except SQLAlchemyError as e:
        logger.error(f"Error listing posts: {e}")
        raise _internal_error("Failed to retrieve posts")

@router.post("", response_model=PostSchema, status_code=status.HTTP_201_CREATED)
def create_new_post(
    *,
    db: Session = Depends(get_db),
    post_in: PostCreate,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    Create new post owned by the caller.
    """
    try:
        return create_post(db, post_in, author_id=user_id)
    except SQLAlchemyError as e:
        logger.error(f"Error creating post: {e}")
        raise _internal_error("Failed to create post")

@router.get("/user/posts", response_model=List[PostSchema])
def read_my_posts(
    *,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    Get all posts of the caller, newest first.
    """
    try:
        return get_user_posts(db, user_id=user_id)
    except SQLAlchemyError as e:
        logger.error(f"Error listing posts of user {user_id}: {e}")
        raise _internal_error("Failed to retrieve user posts")

@router.get("/{post_id}", response_model=PostWithAuthor)
def read_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
) -> Any:
    """
    Get post by ID.
    """
    try:
        post = get_post_with_author(db, post_id=post_id)
    except SQLAlchemyError as e:
        logger.error(f"Error retrieving post {post_id}: {e}")
        raise _internal_error("Failed to retrieve post")

    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return post

@router.put("/{post_id}", response_model=PostSchema)
def update_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    post_in: PostUpdate,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    Update a post. Only a post with this id owned by the caller is matched.
    """
    try:
        post = update_post(db, post_id=post_id, author_id=user_id, post_in=post_in)
    except SQLAlchemyError as e:
        logger.error(f"Error updating post {post_id}: {e}")
        raise _internal_error("Failed to update post")

    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return post

@router.delete("/{post_id}", response_model=Message)
def delete_post_by_id(
    *,
    db: Session = Depends(get_db),
    post_id: str,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """
    Delete a post together with its comments and likes.
    """
    try:
        post = get_post(db, post_id=post_id)
        if not post:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Post not found",
            )

        ensure_owner(post.author_id, user_id)

        delete_post(db, post)
    except SQLAlchemyError as e:
        logger.error(f"Error deleting post {post_id}: {e}")
        raise _internal_error("Failed to delete post")

    return {"message": "deleted post"}
