from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..api.payload import json_object
from ..auth.guards import build_guards
from ..container import Container


def register(app: Flask, container: Container, *, prefix: str) -> None:
    guards = build_guards(container.auth_service)

    # Read endpoints are public: the landing page shows the price list.
    @app.route(f"{prefix}/services", methods=["GET"], endpoint="list_services")
    def list_services():
        services = container.catalog_service.list_services(search=request.args.get("q"))
        return jsonify([s.to_dict() for s in services])

    @app.route(f"{prefix}/services/summary", methods=["GET"], endpoint="services_summary")
    def services_summary():
        return jsonify(asdict(container.catalog_service.summary()))

    @app.route(f"{prefix}/services/<service_id>", methods=["GET"], endpoint="get_service")
    def get_service(service_id: str):
        return jsonify(container.catalog_service.get_service(service_id).to_dict())

    @app.route(f"{prefix}/services", methods=["POST"], endpoint="create_service")
    @guards.admin_required
    def create_service():
        data = json_object()
        service_id = container.catalog_service.create_service(
            name=data.get("name"),
            price_per_kg=data.get("price_per_kg"),
            estimated_hours=data.get("estimated_hours"),
            description=data.get("description"),
        )
        return jsonify({"id": service_id})

    @app.route(f"{prefix}/services/<service_id>", methods=["PUT"], endpoint="update_service")
    @guards.admin_required
    def update_service(service_id: str):
        data = json_object()
        container.catalog_service.update_service(
            service_id,
            name=data.get("name"),
            price_per_kg=data.get("price_per_kg"),
            estimated_hours=data.get("estimated_hours"),
            description=data.get("description"),
        )
        return jsonify({"success": True})

    @app.route(f"{prefix}/services/<service_id>", methods=["DELETE"], endpoint="delete_service")
    @guards.admin_required
    def delete_service(service_id: str):
        container.catalog_service.delete_service(service_id)
        return jsonify({"success": True})
