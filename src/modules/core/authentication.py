"""Static API-key authentication backend for Django REST Framework.

Clients send a shared secret in the ``X-API-KEY`` header.  Accepted
keys come from the ``API_KEYS`` setting (comma-separated env var).

Security decisions
------------------
* **Fail Closed**: no header means unauthenticated (401 through the
  default ``IsAuthenticated`` permission); an unknown key is rejected
  with ``AuthenticationFailed`` (401).
* Keys are compared with ``hmac.compare_digest`` against every
  configured key, so timing does not reveal a matching prefix.
* Key values are never logged.
"""

from __future__ import annotations

import hmac
from typing import Iterable, Optional, Tuple

import structlog
from django.conf import settings
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.request import Request

logger = structlog.get_logger(__name__)

API_KEY_HEADER = "X-API-KEY"


class ApiClient:
    """Principal attached to ``request.user`` for key-authenticated calls.

    There is no per-client identity behind a shared key, so every
    caller is the same anonymous-but-trusted client.
    """

    username = "API_CLIENT"
    is_authenticated = True
    is_active = True

    def __str__(self) -> str:
        return self.username


def _key_matches(candidate: str, keys: Iterable[str]) -> bool:
    matched = False
    for key in keys:
        if hmac.compare_digest(candidate.encode(), key.encode()):
            matched = True
    return matched


class ApiKeyAuthentication(BaseAuthentication):
    """DRF authentication class that validates the ``X-API-KEY`` header."""

    header = API_KEY_HEADER

    def authenticate(self, request: Request) -> Optional[Tuple[ApiClient, str]]:
        """Return ``(ApiClient, key)`` or ``None`` when no key was sent."""
        api_key = request.headers.get(self.header)
        if not api_key:
            return None

        if not _key_matches(api_key, getattr(settings, "API_KEYS", [])):
            logger.warning("api_key_rejected", path=request.path)
            raise AuthenticationFailed("Invalid API key.")

        return (ApiClient(), api_key)

    def authenticate_header(self, request: Request) -> str:
        """Value for the ``WWW-Authenticate`` response header on 401."""
        return f'ApiKey header="{self.header}"'
