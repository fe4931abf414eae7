from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, api_view, current_role, json_body, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _shift_fields(body: dict) -> dict:
        return {
            "name": body.get("name", ""),
            "start_time": body.get("start_time", ""),
            "end_time": body.get("end_time", ""),
            "grace_minutes": body.get("grace_minutes", 0),
            **{flag: bool(body[flag]) for flag in ("is_ramadan", "is_active") if flag in body},
        }

    @app.route("/api/shifts/active", methods=["GET"], endpoint="active_shift")
    @login_required
    @api_view
    def active_shift():
        return ok(container.shift_service.get_active_shift())

    @app.route("/api/admin/shifts", methods=["GET"], endpoint="admin_shifts")
    @admin_required
    @api_view
    def admin_shifts():
        return ok(container.shift_service.list_shifts())

    @app.route("/api/admin/shifts", methods=["POST"], endpoint="add_shift")
    @admin_required
    @api_view
    def add_shift():
        shift_id = container.shift_service.create_shift(current_role=current_role(), **_shift_fields(json_body()))
        return ok({"shift_id": shift_id}, message="Shift created", status=201)

    @app.route("/api/admin/shifts/<int:shift_id>", methods=["PUT"], endpoint="edit_shift")
    @admin_required
    @api_view
    def edit_shift(shift_id: int):
        container.shift_service.update_shift(current_role=current_role(), shift_id=shift_id, **_shift_fields(json_body()))
        return ok(message="Shift updated")

    @app.route("/api/admin/shifts/<int:shift_id>/active", methods=["POST"], endpoint="toggle_shift")
    @admin_required
    @api_view
    def toggle_shift(shift_id: int):
        is_active = bool(json_body().get("is_active", True))
        container.shift_service.set_active(current_role=current_role(), shift_id=shift_id, is_active=is_active)
        return ok(message="Shift activated" if is_active else "Shift deactivated")

    @app.route("/api/admin/shifts/<int:shift_id>", methods=["DELETE"], endpoint="delete_shift")
    @admin_required
    @api_view
    def delete_shift(shift_id: int):
        container.shift_service.delete_shift(current_role=current_role(), shift_id=shift_id)
        return ok(message="Shift deleted")
