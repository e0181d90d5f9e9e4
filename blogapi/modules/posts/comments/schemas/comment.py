from typing import List, Optional
from datetime import datetime
from pydantic import Field

from blogapi.core.schemas import APIModel, RequestModel, UserName

class CommentCreate(RequestModel):
    # Emptiness is checked by the router so it can answer 400 instead of 422
    content: Optional[str] = None

class Comment(APIModel):
    """Comment model returned to client"""
    id: str
    content: str
    user_id: str
    post_id: str
    created_at: datetime

class CommentWithUser(Comment):
    user: UserName = Field(default_factory=UserName)

class CommentCreated(APIModel):
    message: str = "Comment added"
    comment: Comment

class CommentList(APIModel):
    comments: List[CommentWithUser]
