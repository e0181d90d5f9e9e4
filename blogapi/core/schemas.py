from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Response base: reads ORM objects, serializes field names as camelCase"""
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class RequestModel(BaseModel):
    """Request DTO base: unknown fields are rejected"""
    model_config = ConfigDict(extra="forbid")


class Message(BaseModel):
    message: str


class UserName(APIModel):
    """Display name of a post author, commenter or liker"""
    name: Optional[str] = None
