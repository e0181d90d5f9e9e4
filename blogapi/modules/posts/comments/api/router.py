from typing import Any
import logging

from fastapi import APIRouter, Depends, HTTPException, status, Path
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blogapi.core.permissions import ensure_owner
from blogapi.core.schemas import Message
from blogapi.db.session import get_db
from blogapi.deps import get_current_user_id
from blogapi.modules.posts.services.post import get_post
from blogapi.modules.posts.comments.schemas.comment import (
    Comment as CommentSchema, CommentCreate, CommentCreated, CommentList
)
from blogapi.modules.posts.comments.services.comment import (
    get_comment, get_comments_by_post, create_comment, delete_comment
)

router = APIRouter()
logger = logging.getLogger("blogapi")

def _validate_post(db: Session, post_id: str) -> None:
    """Validate post exists or raise HTTPException"""
    post = get_post(db, post_id=post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

def _validate_comment(db: Session, comment_id: str) -> Any:
    """Validate comment exists and return it or raise HTTPException"""
    comment = get_comment(db, comment_id=comment_id)
    if not comment:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found."
        )
    return comment

@router.post("/{post_id}/comment", response_model=CommentCreated, status_code=status.HTTP_201_CREATED)
def create_new_comment(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to comment on"),
    comment_in: CommentCreate,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Create new comment on a post"""
    content = (comment_in.content or "").strip()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Content cannot be empty."
        )

    try:
        _validate_post(db, post_id)
        comment = create_comment(db, post_id=post_id, user_id=user_id, content=content)
    except SQLAlchemyError as e:
        logger.error(f"Error creating comment: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to add comment"
        )

    return {"message": "Comment added", "comment": CommentSchema.model_validate(comment)}

@router.get("/{post_id}/comments", response_model=CommentList)
def read_comments_by_post_id(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to get comments for"),
) -> Any:
    """Get comments by post ID, newest first"""
    try:
        return {"comments": get_comments_by_post(db, post_id=post_id)}
    except SQLAlchemyError as e:
        logger.error(f"Error retrieving comments: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve comments"
        )

@router.delete("/comments/{comment_id}", response_model=Message)
def delete_comment_by_id(
    *,
    db: Session = Depends(get_db),
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Delete a comment written by the caller"""
    try:
        comment = _validate_comment(db, comment_id)
        ensure_owner(
            comment.user_id,
            user_id,
            detail="You do not have permission to delete this comment.",
        )
        delete_comment(db, comment)
    except SQLAlchemyError as e:
        logger.error(f"Error deleting comment: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment."
        )

    return {"message": "Comment deleted successfully."}
