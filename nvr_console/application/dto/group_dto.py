from typing import Optional
from pydantic import BaseModel


class GroupCreateRequest(BaseModel):
    """DTO for group creation request"""
    name: Optional[str] = None


class GroupResponse(BaseModel):
    """DTO for group response"""
    name: str
