from fastapi import APIRouter, Depends
from typing import Any

from signup_api.config import Settings
from signup_api.core.dependencies import get_datastore, get_request_payload, get_settings
from signup_api.modules.animation_services.schemas import AnimationServiceResponse
from signup_api.modules.animation_services.service import AnimationServiceService

router = APIRouter(tags=["animation-services"])


def get_animation_service_service(
    datastore=Depends(get_datastore),
    settings: Settings = Depends(get_settings),
) -> AnimationServiceService:
    return AnimationServiceService(datastore, settings)


@router.post("/animation-service", response_model=AnimationServiceResponse)
def submit_animation_service(
    payload: Any = Depends(get_request_payload),
    service: AnimationServiceService = Depends(get_animation_service_service),
):
    """Save an animation service form submission (JSON or Webflow form post)"""
    rows = service.submit(payload)
    return AnimationServiceResponse(message="Form submitted successfully!", data=rows)
