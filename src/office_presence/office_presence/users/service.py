from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthError, StoreError, ValidationError
from .model import CurrentUser
from .repository import UserRepository

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "Sign-in is temporarily unavailable, please try again later"


def _normalize_email(email: str) -> str:
    email = require_non_empty(email or "", "Email").lower()
    if "@" not in email or email.startswith("@") or email.endswith("@"):
        raise ValidationError("Email is not valid")
    return email


class AuthService:
    """Use cases: sign up and sign in with email and password.

    Store failures surface as AuthError so the caller can show the message.
    """

    def __init__(self, users: UserRepository):
        self._users = users

    def register(self, email: str, password: str) -> CurrentUser:
        try:
            email = _normalize_email(email)
            require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        except ValidationError as e:
            raise AuthError(str(e)) from e

        try:
            if self._users.get_by_email(email):
                raise AuthError("An account with this email already exists")
            user_id = self._users.create_user(email=email, password_hash=generate_password_hash(password))
        except StoreError as e:
            logger.warning("Sign-up failed on the user store: %s", e)
            raise AuthError(UNAVAILABLE_MESSAGE) from e

        logger.info("Registered user %s", user_id)
        return CurrentUser(id=user_id, email=email)

    def authenticate(self, email: str, password: str) -> CurrentUser:
        try:
            email = _normalize_email(email)
        except ValidationError:
            raise AuthError("Wrong email or password")

        try:
            user = self._users.get_by_email(email)
        except StoreError as e:
            logger.warning("Sign-in failed on the user store: %s", e)
            raise AuthError(UNAVAILABLE_MESSAGE) from e

        if not user or not user.is_active:
            raise AuthError("Wrong email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Failed sign-in for user %s", user.user_id)
            raise AuthError("Wrong email or password")

        return CurrentUser(id=user.user_id, email=user.email)
