from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, api_view, current_role, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/activity/devices", methods=["GET"], endpoint="employee_devices")
    @admin_required
    @api_view
    def employee_devices():
        return ok(container.activity_service.list_devices(current_role=current_role()))

    @app.route(
        "/api/admin/activity/<int:employee_id>/<string:device_id>",
        methods=["GET"],
        endpoint="employee_device_activity",
    )
    @admin_required
    @api_view
    def employee_device_activity(employee_id: int, device_id: str):
        rows = container.activity_service.device_activity(
            current_role=current_role(),
            employee_id=employee_id,
            device_id=device_id,
        )
        return ok(rows)
