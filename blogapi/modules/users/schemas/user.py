from typing import Optional
from pydantic import EmailStr, Field, field_validator

from blogapi.core.schemas import APIModel, RequestModel

class Credentials(RequestModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Normalize email to lowercase."""
        return v.lower()

class SignupInput(Credentials):
    password: str = Field(..., min_length=6)
    name: Optional[str] = Field(None, max_length=100)

class SigninInput(Credentials):
    pass

class Token(APIModel):
    jwt: str
