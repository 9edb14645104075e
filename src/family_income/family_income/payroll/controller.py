from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify

from ..common.datetime_utils import current_month_id
from ..container import Container
from ..state.controller import person_or_404


def register(app: Flask, container: Container) -> None:
    @app.route("/api/summary/<person>/<month_id>", methods=["GET"], endpoint="api_summary")
    def api_summary(person: str, month_id: str):
        summary = container.payroll_report_service.summary(person_or_404(person), month_id)
        return jsonify(summary.to_dict())

    @app.route("/api/report", methods=["GET"], endpoint="api_report_current")
    @app.route("/api/report/<month_id>", methods=["GET"], endpoint="api_report")
    def api_report(month_id: Optional[str] = None):
        report = container.payroll_report_service.build_monthly_report(month_id or current_month_id())
        return jsonify(report.to_dict())
