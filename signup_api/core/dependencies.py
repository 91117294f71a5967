"""
Core dependencies wiring the Supabase clients and request bodies into services.

Tests replace these through app.dependency_overrides.
"""

from typing import Any

from fastapi import Depends, Request
from supabase import Client

from signup_api.config import Settings, settings
from signup_api.core.errors import ValidationError
from signup_api.database.gateways import SupabaseAuthProvider, SupabaseDatastore
from signup_api.database.supabase_client import get_auth_supabase, get_service_supabase, get_supabase

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_settings() -> Settings:
    return settings


def get_auth_provider(
    supabase: Client = Depends(get_auth_supabase),
    admin: Client = Depends(get_service_supabase),
) -> SupabaseAuthProvider:
    return SupabaseAuthProvider(supabase, admin_client=admin)


def get_datastore(supabase: Client = Depends(get_supabase)) -> SupabaseDatastore:
    return SupabaseDatastore(supabase)


async def get_request_payload(request: Request) -> Any:
    """Request body as JSON or as a submitted HTML form; None when empty"""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form)
    if not await request.body():
        return None
    try:
        return await request.json()
    except ValueError as e:
        raise ValidationError("Request body is not valid JSON") from e
