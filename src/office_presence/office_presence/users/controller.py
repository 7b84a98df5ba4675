from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, request

from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import AuthError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
    identity = container.identity

    def _credentials() -> tuple[str, str, bool]:
        data = request.get_json(silent=True) or {}
        return str(data.get("email") or ""), str(data.get("password") or ""), bool(data.get("remember"))

    @app.route("/api/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        email, password, remember = _credentials()
        try:
            user = container.auth_service.register(email, password)
        except AuthError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        identity.sign_in(user, remember=remember)
        return jsonify({"success": True, "user": {"id": user.id, "email": user.email}}), 201

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        email, password, remember = _credentials()
        try:
            user = container.auth_service.authenticate(email, password)
        except AuthError as e:
            return jsonify({"success": False, "message": str(e)}), 401
        identity.sign_in(user, remember=remember)
        return jsonify({"success": True, "user": {"id": user.id, "email": user.email}})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        identity.sign_out()
        return jsonify({"success": True})

    @app.route("/api/auth/me", endpoint="me")
    def me():
        user = identity.current_user()
        if not user:
            return jsonify({"success": False, "message": "Not signed in"}), 401
        return jsonify({"success": True, "user": {"id": user.id, "email": user.email}})
