from __future__ import annotations

from flask import Flask, jsonify

from ..auth.guards import build_guards
from ..container import Container
from ..database.mysql_base import ping


def register(app: Flask, container: Container, *, prefix: str) -> None:
    guards = build_guards(container.auth_service)

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return "LaundryZone backend is running", 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route(f"{prefix}/debug/connection", methods=["GET"], endpoint="debug_connection")
    @guards.admin_required
    def debug_connection():
        ping(container.conn)
        return jsonify({"status": "success", "message": "Database connection OK"})
