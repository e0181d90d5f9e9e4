from typing import Optional
import uuid
import logging
from sqlalchemy.orm import Session

from blogapi.core.security import get_password_hash
from blogapi.modules.users.models.user import User
from blogapi.modules.users.schemas.user import SignupInput

logger = logging.getLogger("blogapi")

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get user by email"""
    return db.query(User).filter(User.email == email).first()

def create_user(db: Session, user_in: SignupInput) -> User:
    """Hash the password and persist a new user"""
    user = User(
        id=str(uuid.uuid4()),
        email=user_in.email,
        name=user_in.name,
        hashed_password=get_password_hash(user_in.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Created user {user.id}")
    return user
