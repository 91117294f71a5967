from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from typing import Any

from signup_api.config import Settings
from signup_api.core.dependencies import get_auth_provider, get_datastore, get_request_payload, get_settings
from signup_api.modules.registration.service import RegistrationWorkflow, status_code_for

router = APIRouter(tags=["registration"])


def get_registration_workflow(
    auth=Depends(get_auth_provider),
    datastore=Depends(get_datastore),
    settings: Settings = Depends(get_settings),
) -> RegistrationWorkflow:
    return RegistrationWorkflow(auth, datastore, settings)


@router.post("/register")
def register(
    payload: Any = Depends(get_request_payload),
    workflow: RegistrationWorkflow = Depends(get_registration_workflow),
):
    """Register a new user from a JSON or form body; the response always carries `success`"""
    result = workflow.register(payload)
    return JSONResponse(status_code=status_code_for(result), content=result.to_response())
