from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional


class AnimationServiceSubmission(BaseModel):
    """Webflow form payload; fields arrive in camelCase."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    num_drones: Optional[int] = None
    service_category: Optional[str] = None
    service_name: Optional[str] = None
    drones: Optional[Any] = None
    cover_images: Optional[Any] = None
    speed_up: Optional[Any] = None
    basic_prep_time: Optional[Any] = None
    fast_prep_time: Optional[Any] = None
    basic_price: Optional[float] = None
    fast_price: Optional[float] = None
    file_uploads: Optional[Any] = None
    file_format: Optional[str] = None
    included: Optional[Any] = None
    max_shapes: Optional[int] = None
    num_edits: Optional[int] = None


class AnimationServiceResponse(BaseModel):
    success: bool = True
    message: str
    data: List[Dict[str, Any]]
