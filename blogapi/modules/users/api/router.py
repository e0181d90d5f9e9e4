from typing import Any
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from blogapi.core.security import create_access_token, verify_password
from blogapi.db.session import get_db
from blogapi.modules.users.schemas.user import SignupInput, SigninInput, Token
from blogapi.modules.users.services.user import get_user_by_email, create_user

router = APIRouter()
logger = logging.getLogger("blogapi")

def _email_in_use() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Email address already in use",
    )

@router.post("/signup", response_model=Token)
def signup(
    *,
    db: Session = Depends(get_db),
    user_in: SignupInput,
) -> Any:
    """Register a new account and return a session token"""
    if get_user_by_email(db, email=user_in.email):
        raise _email_in_use()

    try:
        user = create_user(db, user_in)
    except IntegrityError:
        # Same email registered between the lookup and the insert
        db.rollback()
        logger.warning(f"Concurrent signup for {user_in.email}")
        raise _email_in_use()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating user: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user",
        )

    return Token(jwt=create_access_token(user.id))

@router.post("/signin", response_model=Token)
def signin(
    *,
    db: Session = Depends(get_db),
    credentials: SigninInput,
) -> Any:
    """Check credentials and return a session token"""
    user = get_user_by_email(db, email=credentials.email)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="user not found",
        )

    if not verify_password(credentials.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="invalid password",
        )

    return Token(jwt=create_access_token(user.id))
