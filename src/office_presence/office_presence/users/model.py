from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Account that owns month records.

    Plain data object, no DB access here.
    """

    user_id: int
    email: str
    password_hash: str
    is_active: bool = True


@dataclass(frozen=True)
class CurrentUser:
    """What the rest of the app sees of the signed-in user."""

    id: int
    email: str
