# Import all models here so Alembic and create_all can detect them
from blogapi.db.session import Base

from blogapi.modules.users.models.user import User
from blogapi.modules.posts.models.post import Post
from blogapi.modules.posts.comments.models.comment import Comment
from blogapi.modules.posts.likes.models.like import Like
