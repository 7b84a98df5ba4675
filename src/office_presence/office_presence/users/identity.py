from __future__ import annotations

from typing import Callable, MutableMapping, Optional, Protocol

from .model import CurrentUser

Listener = Callable[[Optional[CurrentUser]], None]


class IdentityProvider(Protocol):
    def current_user(self) -> Optional[CurrentUser]:
        raise NotImplementedError

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        raise NotImplementedError


class SessionIdentityProvider(IdentityProvider):
    """Identity kept in a Flask session (or any mutable mapping).

    Listeners are called with the new user (or None) on sign-in/sign-out.
    """

    def __init__(self, session_getter: Callable[[], MutableMapping]):
        self._session_getter = session_getter
        self._listeners: list[Listener] = []

    def current_user(self) -> Optional[CurrentUser]:
        session = self._session_getter()
        if "user_id" not in session:
            return None
        return CurrentUser(id=int(session["user_id"]), email=str(session.get("email") or ""))

    def sign_in(self, user: CurrentUser, *, remember: bool = False) -> None:
        session = self._session_getter()
        session["user_id"] = user.id
        session["email"] = user.email
        if hasattr(session, "permanent"):
            session.permanent = bool(remember)
        self._notify(user)

    def sign_out(self) -> None:
        self._session_getter().clear()
        self._notify(None)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, user: Optional[CurrentUser]) -> None:
        for listener in list(self._listeners):
            listener(user)
