from typing import Any
import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status, Path
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blogapi.db.session import get_db
from blogapi.deps import get_current_user_id
from blogapi.modules.posts.services.post import get_post
from blogapi.modules.posts.likes.schemas.like import Like as LikeSchema, LikeToggled, LikeList
from blogapi.modules.posts.likes.services.like import get_likes_by_post, toggle_like

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

@router.post("/{post_id}/toggle-like", response_model=LikeToggled, response_model_exclude_none=True)
def toggle_post_like(
    *,
    db: Session = Depends(get_db),
    response: Response,
    post_id: str = Path(..., description="The ID of the post to like or unlike"),
    user_id: str = Depends(get_current_user_id),
) -> Any:
    """Like the post if the caller has not yet, otherwise remove the like"""
    try:
        _validate_post(db, post_id)
        liked, like = toggle_like(db, post_id=post_id, user_id=user_id)
    except SQLAlchemyError as e:
        logger.error(f"Error toggling like: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to toggle like"
        )

    if not liked:
        return {"message": "Post unliked"}

    response.status_code = status.HTTP_201_CREATED
    return {"message": "Post liked", "like": LikeSchema.model_validate(like)}

@router.get("/{post_id}/likes", response_model=LikeList)
def read_likes_by_post_id(
    *,
    db: Session = Depends(get_db),
    post_id: str = Path(..., description="The ID of the post to get likes for"),
) -> Any:
    """Get likes by post ID with liker names"""
    try:
        return {"likes": get_likes_by_post(db, post_id=post_id)}
    except SQLAlchemyError as e:
        logger.error(f"Error retrieving likes: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve likes"
        )
