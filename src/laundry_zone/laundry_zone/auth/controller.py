from __future__ import annotations

from flask import Flask, jsonify

from ..api.payload import json_object
from ..container import Container
from .guards import build_guards, current_principal


def register(app: Flask, container: Container, *, prefix: str) -> None:
    guards = build_guards(container.auth_service)

    @app.route(f"{prefix}/login", methods=["POST"], endpoint="login")
    def login():
        data = json_object()
        result = container.auth_service.login(data.get("username"), data.get("password"))
        return jsonify({"token": result.token, "user": result.user})

    @app.route(f"{prefix}/me", methods=["GET"], endpoint="me")
    @guards.login_required
    def me():
        principal = current_principal()
        return jsonify({"id": principal.id, "username": principal.username, "role": principal.role.value})

    @app.route(f"{prefix}/me/password", methods=["PUT"], endpoint="change_password")
    @guards.login_required
    def change_password():
        data = json_object()
        container.auth_service.change_password(
            current_principal(),
            current_password=data.get("current_password"),
            new_password=data.get("new_password"),
            confirm_password=data.get("confirm_password"),
        )
        return jsonify({"success": True})
