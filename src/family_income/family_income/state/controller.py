from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.enums import Person
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .model import MonthlyData, PersonSettings, Settings


def person_or_404(value: str) -> Person:
    try:
        return Person(value)
    except ValueError:
        raise NotFoundError(f"Unknown person: {value}") from None


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def register(app: Flask, container: Container) -> None:
    @app.route("/api/state", methods=["GET"], endpoint="api_state")
    def api_state():
        return jsonify(container.state_service.get_state().to_dict())

    @app.route("/api/settings", methods=["PUT"], endpoint="api_update_settings")
    def api_update_settings():
        state = container.state_service.update_settings(Settings.from_dict(json_body()))
        return jsonify({"success": True, "settings": state.settings.to_dict()})

    @app.route("/api/settings/<person>", methods=["PUT"], endpoint="api_update_person_settings")
    def api_update_person_settings(person: str):
        p = person_or_404(person)
        state = container.state_service.update_person_settings(p, PersonSettings.from_dict(json_body()))
        return jsonify({"success": True, "settings": state.settings.for_person(p).to_dict()})

    @app.route("/api/months/<month_id>", methods=["PUT"], endpoint="api_update_month")
    def api_update_month(month_id: str):
        monthly = MonthlyData.from_dict(json_body(), month_id=month_id)
        state = container.state_service.update_month(month_id, monthly)
        return jsonify({"success": True, "month": state.month(month_id).to_dict()})

    @app.route("/api/days/<person>/<iso_date>", methods=["PUT"], endpoint="api_set_day")
    def api_set_day(person: str, iso_date: str):
        p = person_or_404(person)
        container.state_service.set_day(p, iso_date, json_body().get("type", "none"))
        return jsonify({"success": True})

    @app.route("/api/months/<month_id>/calculations", methods=["PUT"], endpoint="api_set_calculations")
    def api_set_calculations(month_id: str):
        container.state_service.set_calculations(month_id, json_body().get("calculations"))
        return jsonify({"success": True})

    @app.route("/api/months/<month_id>/<person>/bonus", methods=["PUT"], endpoint="api_set_bonus")
    def api_set_bonus(month_id: str, person: str):
        p = person_or_404(person)
        container.state_service.set_bonus(p, month_id, json_body().get("bonus"))
        return jsonify({"success": True})
