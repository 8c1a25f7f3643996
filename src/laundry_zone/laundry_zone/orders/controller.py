from __future__ import annotations

from flask import Flask, jsonify, request

from ..api.payload import json_object
from ..auth.guards import build_guards, current_principal
from ..container import Container


def register(app: Flask, container: Container, *, prefix: str) -> None:
    guards = build_guards(container.auth_service)

    @app.route(f"{prefix}/orders", methods=["GET"], endpoint="list_orders")
    @guards.admin_required
    def list_orders():
        orders = container.order_service.list_orders(
            search=request.args.get("q"),
            status=request.args.get("status"),
        )
        return jsonify([o.to_dict() for o in orders])

    @app.route(f"{prefix}/orders/summary", methods=["GET"], endpoint="orders_summary")
    @guards.admin_required
    def orders_summary():
        return jsonify(container.order_service.summary())

    @app.route(f"{prefix}/my-orders", methods=["GET"], endpoint="my_orders")
    @guards.login_required
    def my_orders():
        orders = container.order_service.list_orders_for_customer(current_principal().id)
        return jsonify([o.to_dict() for o in orders])

    @app.route(f"{prefix}/orders", methods=["POST"], endpoint="place_order")
    @guards.admin_required
    def place_order():
        data = json_object()
        placed = container.order_service.place_order(
            customer_name=data.get("customer_name"),
            customer_phone=data.get("customer_phone"),
            customer_address=data.get("customer_address"),
            service_id=data.get("service_id"),
            weight=data.get("weight"),
        )
        return jsonify(placed.to_response())

    @app.route(f"{prefix}/orders/<order_id>", methods=["PUT"], endpoint="update_order_status")
    @guards.admin_required
    def update_order_status(order_id: str):
        data = json_object()
        container.order_service.update_status(order_id, data.get("status"))
        return jsonify({"success": True})

    @app.route(f"{prefix}/orders/<order_id>", methods=["DELETE"], endpoint="delete_order")
    @guards.admin_required
    def delete_order(order_id: str):
        container.order_service.delete_order(order_id)
        return jsonify({"success": True})
