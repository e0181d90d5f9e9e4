from typing import List, Optional
import math
import uuid
import logging
from sqlalchemy.orm import Session

from blogapi.modules.posts.models.post import Post
from blogapi.modules.posts.schemas.post import PostCreate, PostUpdate, PostWithAuthor, PostPage
from blogapi.modules.posts.comments.models.comment import Comment
from blogapi.modules.posts.likes.models.like import Like
from blogapi.modules.users.models.user import User

logger = logging.getLogger("blogapi")

def _with_author(post: Post, author_name: Optional[str]) -> PostWithAuthor:
    return PostWithAuthor(
        id=post.id,
        title=post.title,
        content=post.content,
        author_id=post.author_id,
        created_at=post.created_at,
        updated_at=post.updated_at,
        author={"name": author_name},
    )

def _query_with_author(db: Session):
    return (
        db.query(Post, User.name)
        .outerjoin(User, User.id == Post.author_id)
        .order_by(Post.created_at.desc(), Post.id)
    )

def get_post(db: Session, post_id: str) -> Optional[Post]:
    """Get post by ID"""
    return db.query(Post).filter(Post.id == post_id).first()

def get_post_with_author(db: Session, post_id: str) -> Optional[PostWithAuthor]:
    """Get post by ID together with its author's display name"""
    row = _query_with_author(db).filter(Post.id == post_id).first()
    if not row:
        return None
    post, author_name = row
    return _with_author(post, author_name)

def total_pages(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size) if page_size else 0

def get_posts_page(db: Session, page: int = 1, page_size: int = 10) -> PostPage:
    """Get one page of posts, newest first, with paging totals"""
    logger.info(f"Getting posts page={page}, page_size={page_size}")
    skip = (page - 1) * page_size
    rows = _query_with_author(db).offset(skip).limit(page_size).all()
    total_count = db.query(Post).count()

    return PostPage(
        posts=[_with_author(post, author_name) for post, author_name in rows],
        page=page,
        page_size=page_size,
        total_count=total_count,
        total_pages=total_pages(total_count, page_size),
    )

def get_user_posts(db: Session, user_id: str) -> List[Post]:
    """Get all posts by user ID, newest first"""
    logger.info(f"Getting posts for user ID: {user_id}")
    return (
        db.query(Post)
        .filter(Post.author_id == user_id)
        .order_by(Post.created_at.desc(), Post.id)
        .all()
    )

def create_post(db: Session, post_in: PostCreate, author_id: str) -> Post:
    """Create new post"""
    logger.info(f"Creating post for author ID: {author_id}")
    post = Post(
        id=str(uuid.uuid4()),
        author_id=author_id,
        **post_in.model_dump(),
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    return post

def update_post(db: Session, post_id: str, author_id: str, post_in: PostUpdate) -> Optional[Post]:
    """
    Update a post owned by author_id.

    Returns None when no post matches both the id and the author, which
    covers a missing post as well as one owned by somebody else.
    """
    logger.info(f"Updating post with ID: {post_id}")
    db_post = (
        db.query(Post)
        .filter(Post.id == post_id, Post.author_id == author_id)
        .first()
    )
    if not db_post:
        return None

    for field, value in post_in.model_dump(exclude_unset=True).items():
        setattr(db_post, field, value)

    db.commit()
    db.refresh(db_post)
    return db_post

def delete_post(db: Session, post: Post) -> Post:
    """
    Delete post and all associated comments and likes
    """
    logger.info(f"Deleting post with ID: {post.id}")
    db.query(Like).filter(Like.post_id == post.id).delete(synchronize_session=False)
    db.query(Comment).filter(Comment.post_id == post.id).delete(synchronize_session=False)

    db.delete(post)
    db.commit()
    return post
