from typing import Any

from fastapi import HTTPException, status


def is_owner(owner_id: Any, requester_id: Any) -> bool:
    """Owner-gated mutation policy shared by posts and comments"""
    return owner_id is not None and str(owner_id) == str(requester_id)


def ensure_owner(owner_id: Any, requester_id: Any, detail: str = "Not enough permissions") -> None:
    """Raise 403 unless the requester owns the resource"""
    if not is_owner(owner_id, requester_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
        )
