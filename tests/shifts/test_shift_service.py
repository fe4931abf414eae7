from __future__ import annotations

from datetime import time

import pytest

from src.hrms.hrms.core.enums import Role
from src.hrms.hrms.core.exceptions import AuthorizationError, MissingActiveShiftError, NotFoundError, ValidationError


def test_create_shift_parses_times(services, repos):
    shift_id = services.shift_service.create_shift(
        current_role=Role.ADMIN,
        name=" Morning ",
        start_time="08:30",
        end_time="17:30",
        grace_minutes="10",
        is_active=True,
    )

    shift = repos.shifts.get_by_id(shift_id)
    assert shift.name == "Morning"
    assert shift.start_time == time(8, 30)
    assert shift.end_time == time(17, 30)
    assert shift.grace_minutes == 10
    assert shift.is_active is True


def test_seconds_are_ignored_when_parsing(services, repos):
    shift_id = services.shift_service.create_shift(
        current_role=Role.ADMIN, name="Early", start_time="07:00:00", end_time="15:00:00", grace_minutes=0
    )

    assert repos.shifts.get_by_id(shift_id).start_time == time(7, 0)


@pytest.mark.parametrize(
    "fields",
    [
        {"name": "", "start_time": "09:00", "end_time": "18:00", "grace_minutes": 0},
        {"name": "X", "start_time": "", "end_time": "18:00", "grace_minutes": 0},
        {"name": "X", "start_time": "25:00", "end_time": "18:00", "grace_minutes": 0},
        {"name": "X", "start_time": "09:00", "end_time": "18:00", "grace_minutes": -5},
        {"name": "X", "start_time": "09:00", "end_time": "18:00", "grace_minutes": "ten"},
    ],
)
def test_invalid_shift_is_rejected(services, fields):
    with pytest.raises(ValidationError):
        services.shift_service.create_shift(current_role=Role.ADMIN, **fields)


def test_employee_cannot_manage_shifts(services, standard_shift):
    with pytest.raises(AuthorizationError):
        services.shift_service.create_shift(
            current_role=Role.EMPLOYEE, name="X", start_time="09:00", end_time="18:00", grace_minutes=0
        )
    with pytest.raises(AuthorizationError):
        services.shift_service.delete_shift(current_role=Role.EMPLOYEE, shift_id=standard_shift.shift_id)


def test_get_active_shift_without_any_active(services, repos):
    repos.shifts.add(name="Idle", start_time=time(9, 0), end_time=time(18, 0), grace_minutes=0, is_active=False)

    with pytest.raises(MissingActiveShiftError):
        services.shift_service.get_active_shift()


def test_get_active_prefers_ramadan(services, repos, standard_shift):
    ramadan = repos.shifts.add(
        name="Ramadan", start_time=time(9, 0), end_time=time(15, 0), grace_minutes=15, is_ramadan=True, is_active=True
    )

    assert services.shift_service.get_active_shift() == ramadan


def test_deactivating_the_only_shift(services, standard_shift):
    services.shift_service.set_active(current_role=Role.ADMIN, shift_id=standard_shift.shift_id, is_active=False)

    with pytest.raises(MissingActiveShiftError):
        services.shift_service.get_active_shift()


def test_update_unknown_shift(services):
    with pytest.raises(NotFoundError):
        services.shift_service.update_shift(
            current_role=Role.ADMIN, shift_id=99, name="X", start_time="09:00", end_time="18:00", grace_minutes=0
        )


def test_update_and_delete_shift(services, repos, standard_shift):
    services.shift_service.update_shift(
        current_role=Role.ADMIN,
        shift_id=standard_shift.shift_id,
        name="Standard",
        start_time="08:00",
        end_time="17:00",
        grace_minutes=5,
        is_active=True,
    )
    assert repos.shifts.get_by_id(standard_shift.shift_id).start_time == time(8, 0)

    services.shift_service.delete_shift(current_role=Role.ADMIN, shift_id=standard_shift.shift_id)
    assert services.shift_service.list_shifts() == []

    with pytest.raises(NotFoundError):
        services.shift_service.delete_shift(current_role=Role.ADMIN, shift_id=standard_shift.shift_id)


def test_update_without_flags_keeps_shift_active(services, repos, standard_shift):
    services.shift_service.update_shift(
        current_role=Role.ADMIN,
        shift_id=standard_shift.shift_id,
        name="Standard (summer)",
        start_time="08:30",
        end_time="17:30",
        grace_minutes=10,
    )

    updated = repos.shifts.get_by_id(standard_shift.shift_id)
    assert updated.is_active is True
    assert updated.is_ramadan is False
    assert services.shift_service.get_active_shift().name == "Standard (summer)"
