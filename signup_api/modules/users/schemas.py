from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class UserProfile(BaseModel):
    id: str
    name: str
    email: str
    industry: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[str] = None


class UserLookupResponse(BaseModel):
    success: bool = True
    data: List[Dict[str, Any]]
