from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, api_view, current_employee_id, current_role, login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/dashboard", methods=["GET"], endpoint="admin_dashboard")
    @admin_required
    @api_view
    def admin_dashboard():
        return ok(container.dashboard_service.admin_stats(current_role=current_role()))

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    @api_view
    def dashboard():
        return ok(container.dashboard_service.employee_stats(employee_id=current_employee_id()))
