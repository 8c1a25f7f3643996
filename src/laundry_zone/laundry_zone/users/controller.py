from __future__ import annotations

from flask import Flask, jsonify, request

from ..api.payload import json_object
from ..auth.guards import build_guards
from ..container import Container


def register(app: Flask, container: Container, *, prefix: str) -> None:
    guards = build_guards(container.auth_service)

    @app.route(f"{prefix}/customers", methods=["GET"], endpoint="list_customers")
    @guards.admin_required
    def list_customers():
        customers = container.customer_service.list_customers(search=request.args.get("q"))
        return jsonify([c.to_public_dict() for c in customers])

    @app.route(f"{prefix}/customers", methods=["POST"], endpoint="create_customer")
    @guards.admin_required
    def create_customer():
        data = json_object()
        user = container.customer_service.create_customer(
            name=data.get("name"),
            phone=data.get("phone"),
            address=data.get("address"),
        )
        return jsonify({"id": user.id, "username": user.username})

    @app.route(f"{prefix}/customers/<customer_id>", methods=["PUT"], endpoint="update_customer")
    @guards.admin_required
    def update_customer(customer_id: str):
        data = json_object()
        container.customer_service.update_customer(
            customer_id,
            name=data.get("name"),
            phone=data.get("phone"),
            address=data.get("address"),
        )
        return jsonify({"success": True})

    @app.route(f"{prefix}/customers/<customer_id>", methods=["DELETE"], endpoint="delete_customer")
    @guards.admin_required
    def delete_customer(customer_id: str):
        container.customer_service.delete_customer(customer_id)
        return jsonify({"success": True})
