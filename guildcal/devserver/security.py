"""Credential checks for the development server."""

from __future__ import annotations

import secrets


TOKEN_BYTES = 24


def generate_token() -> str:
    """Issue a URL-safe bearer token for a logged-in guild member."""
    return secrets.token_urlsafe(TOKEN_BYTES)


def verify_password(candidate: str, expected: str) -> bool:
    """Compare the shared guild password in constant time."""
    return secrets.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))
