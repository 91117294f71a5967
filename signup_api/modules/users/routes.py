from fastapi import APIRouter, Depends

from signup_api.config import Settings
from signup_api.core.dependencies import get_datastore, get_settings
from signup_api.modules.users.schemas import UserLookupResponse
from signup_api.modules.users.service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(
    datastore=Depends(get_datastore),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(datastore, settings)


@router.get("/{user_id}", response_model=UserLookupResponse)
def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
):
    """Get user profile by auth user id"""
    return UserLookupResponse(data=service.get_user(user_id))
