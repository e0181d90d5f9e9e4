from typing import List, Optional, Tuple
import uuid
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from blogapi.modules.posts.likes.models.like import Like
from blogapi.modules.posts.likes.schemas.like import LikeWithUser
from blogapi.modules.users.models.user import User

logger = logging.getLogger("blogapi")

def get_like(db: Session, user_id: str, post_id: str) -> Optional[Like]:
    """Get like by user ID and post ID"""
    return (
        db.query(Like)
        .filter(Like.user_id == user_id, Like.post_id == post_id)
        .first()
    )

def get_likes_by_post(db: Session, post_id: str) -> List[LikeWithUser]:
    """Get likes on a post with each liker's name"""
    rows = (
        db.query(Like, User.name)
        .outerjoin(User, User.id == Like.user_id)
        .filter(Like.post_id == post_id)
        .order_by(Like.created_at.desc(), Like.id)
        .all()
    )
    return [
        LikeWithUser(
            id=like.id,
            user_id=like.user_id,
            post_id=like.post_id,
            created_at=like.created_at,
            user={"name": name},
        )
        for like, name in rows
    ]

def toggle_like(db: Session, post_id: str, user_id: str) -> Tuple[bool, Optional[Like]]:
    """
    Flip the like state of (user_id, post_id).

    Returns (True, like) when the post ends up liked and (False, None) when
    it ends up unliked. The unlike path is a single conditional DELETE and
    the like path relies on the unique constraint, so two concurrent toggles
    can never leave two rows behind.
    """
    deleted = (
        db.query(Like)
        .filter(Like.user_id == user_id, Like.post_id == post_id)
        .delete(synchronize_session=False)
    )
    if deleted:
        db.commit()
        return False, None

    like = Like(id=str(uuid.uuid4()), user_id=user_id, post_id=post_id)
    db.add(like)
    try:
        db.commit()
    except IntegrityError:
        # Another request inserted the same pair first
        db.rollback()
        existing = get_like(db, user_id, post_id)
        if existing is None:
            raise
        logger.warning(f"Concurrent like for post {post_id} by user {user_id}")
        return True, existing

    db.refresh(like)
    return True, like
