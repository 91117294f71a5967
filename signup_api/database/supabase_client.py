"""
Process-wide Supabase clients, one per role.

supabase-py copies the session returned by sign_up onto the client's
PostgREST headers, so sign-ups never share a client with table access:

- auth: sign-ups only
- data: table reads and writes with the anon key
- admin: service role key, for auth admin calls (deleting users)
"""
from typing import Dict

from supabase import Client, ClientOptions, create_client

from signup_api.config import settings

AUTH = "auth"
DATA = "data"
ADMIN = "admin"


def _build(role: str) -> Client:
    key = settings.supabase_key
    if role == ADMIN and settings.supabase_service_role_key:
        key = settings.supabase_service_role_key
    options = ClientOptions(persist_session=False, auto_refresh_token=False)
    return create_client(settings.supabase_url, key, options=options)


class SupabaseClients:
    _clients: Dict[str, Client] = {}

    @classmethod
    def get(cls, role: str) -> Client:
        if role not in cls._clients:
            cls._clients[role] = _build(role)
        return cls._clients[role]

    @classmethod
    def reset(cls):
        cls._clients.clear()


def get_auth_supabase() -> Client:
    return SupabaseClients.get(AUTH)


def get_supabase() -> Client:
    return SupabaseClients.get(DATA)


def get_service_supabase() -> Client:
    return SupabaseClients.get(ADMIN)
