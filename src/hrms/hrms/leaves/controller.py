from __future__ import annotations

from datetime import date

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import (
    admin_required,
    api_view,
    current_employee_id,
    current_role,
    int_arg,
    json_body,
    login_required,
    ok,
)
from ..core.enums import RequestStatus
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    leaves = container.leave_service
    leave_types = container.leave_type_service

    def _leave_type_fields(body: dict) -> dict:
        return {
            "name": body.get("name", ""),
            "description": body.get("description"),
            "is_paid": bool(body.get("is_paid", True)),
            "default_days": body.get("default_days", 0),
        }

    @app.route("/api/leave-types", methods=["GET"], endpoint="leave_types")
    @login_required
    @api_view
    def list_leave_types():
        return ok(leave_types.list_types())

    @app.route("/api/admin/leave-types", methods=["POST"], endpoint="add_leave_type")
    @admin_required
    @api_view
    def add_leave_type():
        leave_type_id = leave_types.create(current_role=current_role(), **_leave_type_fields(json_body()))
        return ok({"leave_type_id": leave_type_id}, message="Leave type created", status=201)

    @app.route("/api/admin/leave-types/<int:leave_type_id>", methods=["PUT"], endpoint="edit_leave_type")
    @admin_required
    @api_view
    def edit_leave_type(leave_type_id: int):
        leave_types.update(current_role=current_role(), leave_type_id=leave_type_id, **_leave_type_fields(json_body()))
        return ok(message="Leave type updated")

    @app.route("/api/admin/leave-types/<int:leave_type_id>", methods=["DELETE"], endpoint="delete_leave_type")
    @admin_required
    @api_view
    def delete_leave_type(leave_type_id: int):
        leave_types.delete(current_role=current_role(), leave_type_id=leave_type_id)
        return ok(message="Leave type deleted")

    @app.route("/api/me/leaves", methods=["GET"], endpoint="my_leaves")
    @login_required
    @api_view
    def my_leaves():
        return ok(leaves.my_requests(current_employee_id()))

    @app.route("/api/me/leaves", methods=["POST"], endpoint="request_leave")
    @login_required
    @api_view
    def request_leave():
        body = json_body()
        request_id = leaves.submit_request(
            employee_id=current_employee_id(),
            leave_type_id=body.get("leave_type_id"),
            start_date=parse_iso_date(body.get("start_date", "")),
            end_date=parse_iso_date(body.get("end_date", "")),
            reason=body.get("reason", ""),
        )
        return ok({"request_id": request_id}, message="Leave request submitted", status=201)

    @app.route("/api/admin/leaves", methods=["GET"], endpoint="admin_leaves")
    @admin_required
    @api_view
    def admin_leaves():
        status_s = request.args.get("status")
        try:
            status = RequestStatus(status_s) if status_s else None
        except ValueError:
            raise ValidationError(f"Unknown request status {status_s!r}")
        return ok(leaves.list_requests(current_role=current_role(), status=status))

    @app.route("/api/admin/leaves/<int:request_id>/approve", methods=["POST"], endpoint="approve_leave")
    @admin_required
    @api_view
    def approve_leave(request_id: int):
        leaves.approve(current_role=current_role(), request_id=request_id)
        return ok(message="Leave request approved")

    @app.route("/api/admin/leaves/<int:request_id>/reject", methods=["POST"], endpoint="reject_leave")
    @admin_required
    @api_view
    def reject_leave(request_id: int):
        leaves.reject(current_role=current_role(), request_id=request_id)
        return ok(message="Leave request rejected")

    @app.route("/api/me/leave-balances", methods=["GET"], endpoint="my_leave_balances")
    @login_required
    @api_view
    def my_leave_balances():
        year = int_arg("year", date.today().year)
        rows = leaves.my_balances(employee_id=current_employee_id(), year=year)
        data = [
            {
                "balance_id": r.balance.balance_id,
                "leave_type": r.leave_type,
                "year": r.balance.year,
                "total_days": r.balance.total_days,
                "used_days": r.balance.used_days,
                "remaining_days": r.balance.remaining_days,
            }
            for r in rows
        ]
        return ok(data)

    @app.route("/api/admin/leave-balances", methods=["GET"], endpoint="admin_leave_balances")
    @admin_required
    @api_view
    def admin_leave_balances():
        matrix = leaves.balance_matrix(current_role=current_role(), year=int_arg("year", date.today().year))
        return ok(
            {
                "year": matrix.year,
                "employees": matrix.employees,
                "leave_types": matrix.leave_types,
                "balances": matrix.balances,
            }
        )

    @app.route("/api/admin/leave-balances/<int:balance_id>", methods=["PUT"], endpoint="edit_leave_balance")
    @admin_required
    @api_view
    def edit_leave_balance(balance_id: int):
        leaves.update_balance(
            current_role=current_role(),
            balance_id=balance_id,
            total_days=json_body().get("total_days"),
        )
        return ok(message="Leave balance updated")
