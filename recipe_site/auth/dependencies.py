from __future__ import annotations

from fastapi import Depends, HTTPException, Request


def get_current_user(request: Request) -> dict | None:
    """Return the ``{email, role}`` dict stored at login, or ``None``."""
    return request.session.get("user")


def require_admin(user: dict | None = Depends(get_current_user)) -> dict:
    """Raise 401 if not logged in, 403 if the account is not the site admin."""
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    if user.get("role") != "admin":
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
