from typing import List, Optional
from datetime import datetime
from pydantic import Field

from blogapi.core.schemas import APIModel, RequestModel, UserName

class PostInput(RequestModel):
    """Body of both create and update; the same shape is validated for each"""
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)

class PostCreate(PostInput):
    pass

class PostUpdate(PostInput):
    pass

class Post(APIModel):
    """Post model returned to client"""
    id: str
    title: str
    content: str
    author_id: str
    created_at: datetime
    updated_at: Optional[datetime] = None

class PostWithAuthor(Post):
    """Post model with the author's display name"""
    author: UserName = Field(default_factory=UserName)

class PostPage(APIModel):
    posts: List[PostWithAuthor]
    page: int
    page_size: int
    total_count: int
    total_pages: int
