"""
Thin wrappers around the Supabase SDK.

Services depend on these two objects only, never on the SDK itself:

- SupabaseAuthProvider: sign_up / delete_user against Supabase Auth
- SupabaseDatastore: insert / select against PostgREST tables

SDK exceptions are translated into AuthProviderError / PersistenceError.
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from signup_api.core.errors import AuthProviderError, PersistenceError

logger = logging.getLogger(__name__)

_LOGGED_AUTH_EVENTS = ("SIGNED_IN", "SIGNED_OUT", "TOKEN_REFRESHED", "USER_UPDATED")


def _error_code(exc: Exception) -> Optional[str]:
    code = getattr(exc, "code", None)
    return str(code) if code is not None else None


class SupabaseAuthProvider:
    def __init__(self, client: Client, admin_client: Optional[Client] = None):
        self.client = client
        self.admin_client = admin_client or client

    def sign_up(self, email: str, password: str, metadata: Dict[str, Any]) -> str:
        """Create an auth user and return its id."""
        try:
            auth_response = self.client.auth.sign_up({
                "email": email,
                "password": password,
                "options": {
                    "data": metadata
                }
            })
        except Exception as e:
            raise AuthProviderError(str(e), code=_error_code(e)) from e

        if not auth_response.user:
            raise AuthProviderError("Failed to register user")
        return auth_response.user.id

    def delete_user(self, identity: str) -> None:
        """Delete an auth user through the admin API (requires service role key)"""
        try:
            self.admin_client.auth.admin.delete_user(identity)
        except Exception as e:
            raise AuthProviderError(str(e), code=_error_code(e)) from e


class SupabaseDatastore:
    def __init__(self, client: Client):
        self.client = client

    def insert(self, table: str, row: Dict[str, Any]) -> List[Dict[str, Any]]:
        try:
            result = self.client.table(table).insert(row).execute()
        except Exception as e:
            raise PersistenceError(
                f"Insert into {table} failed",
                code=_error_code(e),
                detail=getattr(e, "message", None) or str(e),
            ) from e
        return result.data or []

    def select(self, table: str, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        try:
            query = self.client.table(table).select("*")
            for column, value in filters.items():
                query = query.eq(column, value)
            result = query.execute()
        except Exception as e:
            raise PersistenceError(
                getattr(e, "message", None) or str(e),
                code=_error_code(e),
            ) from e
        return result.data or []


def log_auth_events(client: Client):
    """Subscribe to auth state changes and log them. Tokens are never logged."""

    def on_change(event, session):
        name = getattr(event, "value", event)
        user = getattr(session, "user", None) if session else None
        user_id = getattr(user, "id", None)
        if name in _LOGGED_AUTH_EVENTS:
            logger.info("Auth event %s (user=%s)", name, user_id)
        else:
            logger.debug("Auth event %s", name)

    return client.auth.on_auth_state_change(on_change)
