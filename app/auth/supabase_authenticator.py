"""Resolves bearer tokens to users through Supabase Auth."""

import threading
from typing import Any

from supabase import Client, create_client

from app.auth.models import AuthenticatedUser
from app.config.settings import Settings
from app.logging.logger import Log


def parse_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None


class SupabaseAuthenticator:
    """Validates access tokens against Supabase and returns the owning user."""

    def __init__(self, *, url: str, service_role_key: str, client: Client | None = None) -> None:
        self._url = url
        self._service_role_key = service_role_key
        self._client = client
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupabaseAuthenticator":
        return cls(url=settings.supabase_url, service_role_key=settings.supabase_service_role_key)

    def get_user(self, authorization: str | None) -> AuthenticatedUser | None:
        """Return the user for a bearer header, or None if it is missing or invalid.

        Raises:
            RuntimeError: if Supabase is not configured.
        """
        token = parse_bearer_token(authorization)
        if token is None:
            return None

        client = self._get_client()
        try:
            response: Any = client.auth.get_user(token)
        except Exception as exc:
            Log.warning(f"Supabase rejected token: {exc}")
            return None

        user = getattr(response, "user", None)
        user_id = getattr(user, "id", None)
        if not user_id:
            return None
        return AuthenticatedUser(id=str(user_id), email=getattr(user, "email", None))

    def _get_client(self) -> Client:
        if self._client is None:
            with self._lock:
                if self._client is None:
                    if not self._url or not self._service_role_key:
                        raise RuntimeError(
                            "supabase_url and supabase_service_role_key must be configured"
                        )
                    self._client = create_client(self._url, self._service_role_key)
        return self._client
