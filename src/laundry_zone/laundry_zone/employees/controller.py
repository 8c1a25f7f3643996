from __future__ import annotations

from flask import Flask, jsonify, request

from ..api.payload import json_object
from ..auth.guards import build_guards
from ..container import Container


def register(app: Flask, container: Container, *, prefix: str) -> None:
    guards = build_guards(container.auth_service)

    @app.route(f"{prefix}/employees", methods=["GET"], endpoint="list_employees")
    @guards.admin_required
    def list_employees():
        employees = container.employee_service.list_employees(search=request.args.get("q"))
        return jsonify([e.to_dict() for e in employees])

    @app.route(f"{prefix}/employees/summary", methods=["GET"], endpoint="employees_summary")
    @guards.admin_required
    def employees_summary():
        return jsonify(container.employee_service.summary())

    @app.route(f"{prefix}/employees", methods=["POST"], endpoint="create_employee")
    @guards.admin_required
    def create_employee():
        data = json_object()
        employee_id = container.employee_service.create_employee(
            name=data.get("name"),
            phone=data.get("phone"),
            status=data.get("status"),
            hire_date=data.get("hire_date"),
        )
        return jsonify({"id": employee_id})

    @app.route(f"{prefix}/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @guards.admin_required
    def update_employee(employee_id: str):
        data = json_object()
        container.employee_service.update_employee(
            employee_id,
            name=data.get("name"),
            phone=data.get("phone"),
            status=data.get("status"),
            hire_date=data.get("hire_date"),
        )
        return jsonify({"success": True})

    @app.route(f"{prefix}/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @guards.admin_required
    def delete_employee(employee_id: str):
        container.employee_service.delete_employee(employee_id)
        return jsonify({"success": True})
