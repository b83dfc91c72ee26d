from __future__ import annotations

from typing import Any, Protocol

import bcrypt

from .config import DEFAULT_AUTH_CONFIG, AuthConfig


class Authenticator(Protocol):
    def authenticate(self, email: str, password: str) -> dict[str, Any] | None: ...


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


class PasswordAuthenticator:
    """Email/password accounts held in memory as bcrypt hashes."""

    def __init__(self) -> None:
        self._users: dict[str, dict[str, Any]] = {}

    def add_user(self, email: str, password: str, role: str = "admin") -> None:
        self._users[email.lower()] = {"password_hash": _hash_password(password), "role": role}

    def authenticate(self, email: str, password: str) -> dict[str, Any] | None:
        """Verify credentials. Returns ``{email, role}`` or ``None``."""
        record = self._users.get(email.lower())
        if record and _verify_password(password, record["password_hash"]):
            return {"email": email.lower(), "role": record["role"]}
        return None


def build_authenticator(config: AuthConfig = DEFAULT_AUTH_CONFIG) -> PasswordAuthenticator:
    """Seed the single site admin from config."""
    auth = PasswordAuthenticator()
    auth.add_user(config.admin_email, config.admin_password, role="admin")
    return auth


_authenticator: Authenticator = build_authenticator()


def set_authenticator(authenticator: Authenticator) -> None:
    global _authenticator
    _authenticator = authenticator


def authenticate(email: str, password: str) -> dict[str, Any] | None:
    return _authenticator.authenticate(email, password)
