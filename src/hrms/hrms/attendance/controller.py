from __future__ import annotations

from datetime import date

from flask import Flask

from ..common.web import (
    admin_required,
    api_view,
    current_employee_id,
    current_role,
    date_arg,
    int_arg,
    json_body,
    login_required,
    ok,
)
from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_positive_id
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/admin/attendance", methods=["GET"], endpoint="admin_attendance")
    @admin_required
    @api_view
    def admin_attendance():
        work_date = date_arg("date", date.today())
        roster = service.daily_roster(current_role=current_role(), work_date=work_date, page=int_arg("page", 1))
        rows = [
            {
                "employee": entry.employee,
                "attendance": service.to_ui(entry.record) if entry.record else None,
            }
            for entry in roster
        ]
        return ok({"date": work_date, "is_current_day": work_date == date.today(), "rows": rows})

    @app.route("/api/admin/attendance", methods=["POST"], endpoint="mark_attendance")
    @admin_required
    @api_view
    def mark_attendance():
        body = json_body()
        work_date_s = body.get("date")
        record = service.mark_attendance(
            current_role=current_role(),
            employee_id=require_positive_id(body.get("employee_id"), "Employee"),
            work_date=parse_iso_date(work_date_s) if work_date_s else date.today(),
            status=body.get("status"),
            check_in_time=body.get("check_in_time"),
            check_out_time=body.get("check_out_time"),
        )
        return ok(service.to_ui(record), message="Attendance marked", status=201)

    @app.route("/api/admin/attendance/export.csv", methods=["GET"], endpoint="export_attendance")
    @admin_required
    @api_view
    def export_attendance():
        work_date = date_arg("date", date.today())
        content = service.export_day_csv(current_role=current_role(), work_date=work_date)
        filename = f"attendance-{work_date.strftime('%Y-%m-%d')}.csv"
        return app.response_class(
            content.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/me/attendance", methods=["GET"], endpoint="my_attendance")
    @login_required
    @api_view
    def my_attendance():
        rows = service.my_attendance(current_employee_id(), limit=int_arg("limit", DEFAULT_HISTORY_LIMIT))
        return ok([service.to_ui(r) for r in rows])
