from __future__ import annotations

from functools import wraps

from flask import Flask, g, jsonify, request

from ..common.datetime_utils import days_in_month, parse_year_month
from ..common.validators import require_day_in_month, require_int
from ..core.exceptions import StoreError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.month_service

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = container.identity.current_user()
            if user is None:
                return jsonify({"success": False, "message": "Please sign in to continue"}), 401
            g.current_user = user
            return view(*args, **kwargs)

        return wrapper

    def _view_response(view):
        return jsonify({"success": True, "user": {"email": g.current_user.email}, **view.to_dict(service.locale)})

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(StoreError)
    def handle_store_error(e: StoreError):
        return jsonify({"success": False, "message": str(e)}), 503

    @app.route("/api/months/<year_month>", endpoint="month_view")
    @login_required
    def month_view(year_month: str):
        year, month = parse_year_month(year_month)
        view = service.load_month(g.current_user.id, year, month, lenient=True)
        return _view_response(view)

    @app.route("/api/months/<year_month>/days/<day>/toggle", methods=["POST"], endpoint="toggle_day")
    @login_required
    def toggle_day(year_month: str, day: str):
        year, month = parse_year_month(year_month)
        day_n = require_day_in_month(require_int(day, "Day"), days_in_month(year, month))
        view = service.toggle_day(g.current_user.id, year, month, day_n)
        return _view_response(view)

    @app.route("/api/months/<year_month>/settings", methods=["PUT"], endpoint="save_settings")
    @login_required
    def save_settings(year_month: str):
        year, month = parse_year_month(year_month)
        data = request.get_json(silent=True) or {}
        required = data.get("requiredPercent")
        fraction = data.get("employmentFraction")
        view = service.save_settings(
            g.current_user.id,
            year,
            month,
            required_percent=None if required is None else require_int(required, "requiredPercent"),
            employment_fraction=None if fraction is None else require_int(fraction, "employmentFraction"),
        )
        return _view_response(view)
