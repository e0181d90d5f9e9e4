from typing import List, Optional
import uuid
from sqlalchemy.orm import Session

from blogapi.modules.posts.comments.models.comment import Comment
from blogapi.modules.posts.comments.schemas.comment import CommentWithUser
from blogapi.modules.users.models.user import User

def get_comment(db: Session, comment_id: str) -> Optional[Comment]:
    """Get comment by ID"""
    return db.query(Comment).filter(Comment.id == comment_id).first()

def get_comments_by_post(db: Session, post_id: str) -> List[CommentWithUser]:
    """Get comments on a post, newest first, with each commenter's name"""
    rows = (
        db.query(Comment, User.name)
        .outerjoin(User, User.id == Comment.user_id)
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at.desc(), Comment.id)
        .all()
    )
    return [
        CommentWithUser(
            id=comment.id,
            content=comment.content,
            user_id=comment.user_id,
            post_id=comment.post_id,
            created_at=comment.created_at,
            user={"name": name},
        )
        for comment, name in rows
    ]

def create_comment(db: Session, post_id: str, user_id: str, content: str) -> Comment:
    """Create a new comment"""
    comment = Comment(
        id=str(uuid.uuid4()),
        content=content,
        user_id=user_id,
        post_id=post_id,
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment

def delete_comment(db: Session, comment: Comment) -> Comment:
    """Delete comment"""
    db.delete(comment)
    db.commit()
    return comment
