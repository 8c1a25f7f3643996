from __future__ import annotations

from flask import Flask, jsonify

from ..auth.guards import build_guards
from ..container import Container


def register(app: Flask, container: Container, *, prefix: str) -> None:
    guards = build_guards(container.auth_service)

    @app.route(f"{prefix}/statistics", methods=["GET"], endpoint="statistics")
    @guards.login_required
    def statistics():
        return jsonify(container.statistics_service.build().to_dict())
