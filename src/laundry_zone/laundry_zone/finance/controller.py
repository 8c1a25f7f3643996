from __future__ import annotations

from dataclasses import asdict
from datetime import date

from flask import Flask, jsonify, request

from ..api.payload import json_object
from ..auth.guards import build_guards
from ..container import Container
from ..core.exceptions import ValidationError
from .export import to_csv_bytes, to_xlsx_bytes

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container, *, prefix: str) -> None:
    guards = build_guards(container.auth_service)
    base = f"{prefix}/financial-reports"

    def _payload() -> dict:
        data = json_object()
        return {k: data.get(k) for k in ("type", "amount", "description", "date")}

    @app.route(base, methods=["GET"], endpoint="list_financial_reports")
    @guards.login_required
    def list_financial_reports():
        reports = container.finance_service.list_reports(type=request.args.get("type"))
        return jsonify([r.to_dict() for r in reports])

    @app.route(f"{base}/summary", methods=["GET"], endpoint="financial_reports_summary")
    @guards.login_required
    def financial_reports_summary():
        return jsonify(asdict(container.finance_service.summary()))

    @app.route(f"{base}/export", methods=["GET"], endpoint="export_financial_reports")
    @guards.login_required
    def export_financial_reports():
        fmt = (request.args.get("format") or "csv").lower()
        reports = container.finance_service.list_reports(type=request.args.get("type"))
        stamp = date.today().strftime("%Y%m%d")

        if fmt == "csv":
            body, mimetype, filename = to_csv_bytes(reports), "text/csv", f"financial_reports_{stamp}.csv"
        elif fmt == "xlsx":
            body, mimetype, filename = to_xlsx_bytes(reports), XLSX_MIMETYPE, f"financial_reports_{stamp}.xlsx"
        else:
            raise ValidationError("Format must be csv or xlsx")

        return app.response_class(
            body,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route(f"{base}/<report_id>", methods=["GET"], endpoint="get_financial_report")
    @guards.login_required
    def get_financial_report(report_id: str):
        return jsonify(container.finance_service.get_report(report_id).to_dict())

    @app.route(base, methods=["POST"], endpoint="create_financial_report")
    @guards.login_required
    def create_financial_report():
        report = container.finance_service.create_report(**_payload())
        return jsonify(report.to_dict()), 201

    @app.route(f"{base}/<report_id>", methods=["PUT"], endpoint="update_financial_report")
    @guards.login_required
    def update_financial_report(report_id: str):
        report = container.finance_service.update_report(report_id, **_payload())
        return jsonify(report.to_dict())

    @app.route(f"{base}/<report_id>", methods=["DELETE"], endpoint="delete_financial_report")
    @guards.login_required
    def delete_financial_report(report_id: str):
        container.finance_service.delete_report(report_id)
        return jsonify({"message": "Financial report deleted successfully", "id": report_id})
