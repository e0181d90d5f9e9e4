from typing import List, Optional
from datetime import datetime
from pydantic import Field

from blogapi.core.schemas import APIModel, UserName

class Like(APIModel):
    """Like model returned to client"""
    id: str
    user_id: str
    post_id: str
    created_at: datetime

class LikeWithUser(Like):
    user: UserName = Field(default_factory=UserName)

class LikeToggled(APIModel):
    message: str
    like: Optional[Like] = None

class LikeList(APIModel):
    likes: List[LikeWithUser]
