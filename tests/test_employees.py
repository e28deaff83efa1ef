"""직원 서비스 및 API 테스트.

Employee tests: registration uniqueness, deactivation and admin rights.
"""

import uuid

from httpx import AsyncClient

from carrental.domain.enums import AdminRights, parse_admin_rights
from carrental.domain.result import ErrorKind
from carrental.schemas.employee import EmployeeCreate
from carrental.services.employee_service import EmployeeService, admin_right_names
from tests.conftest import NOW

EMPLOYEES_URL = "/api/v1/employees"


def employee_body(
    personnel_number: str = "E-1001",
    email: str = "seoyeon.choi@example.com",
    admin_rights: int = 0,
) -> dict:
    return {
        "first_name": "Seoyeon",
        "last_name": "Choi",
        "email": email,
        "personnel_number": personnel_number,
        "admin_rights": admin_rights,
    }


class TestAdminRights:
    """권한 비트마스크 해석."""

    def test_combined_flags(self):
        rights = parse_admin_rights(AdminRights.MANAGE_FLEET | AdminRights.MANAGE_RENTALS)
        assert rights == AdminRights.MANAGE_FLEET | AdminRights.MANAGE_RENTALS
        assert admin_right_names(int(rights)) == ["manage_fleet", "manage_rentals"]

    def test_none_is_valid(self):
        assert parse_admin_rights(0) == AdminRights.NONE
        assert admin_right_names(0) == []

    def test_undefined_bits_rejected(self):
        assert parse_admin_rights(32) is None
        assert parse_admin_rights(33) is None
        assert parse_admin_rights(-1) is None

    def test_bool_rejected(self):
        assert parse_admin_rights(True) is None


class TestEmployeeService:
    """직원 서비스."""

    async def test_create_normalizes_input(self, db):
        service = EmployeeService(clock=lambda: NOW)
        data = EmployeeCreate(**employee_body(personnel_number=" E-2001 ", email="Seoyeon.Choi@Example.com"))

        result = await service.create_employee(db, data)

        assert result.is_success
        employee = result.value
        assert employee.personnel_number == "E-2001"
        assert employee.email == "seoyeon.choi@example.com"
        assert employee.is_active is True
        assert employee.created_at == NOW

    async def test_missing_personnel_number(self, db):
        service = EmployeeService(clock=lambda: NOW)
        result = await service.create_employee(db, EmployeeCreate(**employee_body(personnel_number="  ")))
        assert result.is_failure
        assert result.error.code == "employee.required_field"

    async def test_duplicate_personnel_number(self, db):
        service = EmployeeService(clock=lambda: NOW)
        await service.create_employee(db, EmployeeCreate(**employee_body()))

        result = await service.create_employee(
            db, EmployeeCreate(**employee_body(email="other@example.com"))
        )
        assert result.error.code == "employee.personnel_number_exists"
        assert result.error.kind is ErrorKind.CONFLICT

    async def test_duplicate_email_ignores_case(self, db):
        service = EmployeeService(clock=lambda: NOW)
        await service.create_employee(db, EmployeeCreate(**employee_body()))

        result = await service.create_employee(
            db, EmployeeCreate(**employee_body(personnel_number="E-1002", email="SEOYEON.CHOI@example.com"))
        )
        assert result.error.code == "employee.email_exists"

    async def test_deactivate_once(self, db):
        """비활성화는 한 번만 가능."""
        service = EmployeeService(clock=lambda: NOW)
        employee = (await service.create_employee(db, EmployeeCreate(**employee_body()))).value

        first = await service.deactivate(db, employee.id)
        assert first.is_success
        assert employee.is_active is False
        assert employee.deactivated_at == NOW

        second = await service.deactivate(db, employee.id)
        assert second.is_failure
        assert second.error.code == "employee.already_deactivated"
        assert employee.deactivated_at == NOW

    async def test_set_admin_rights_replaces_mask(self, db):
        service = EmployeeService(clock=lambda: NOW)
        employee = (
            await service.create_employee(db, EmployeeCreate(**employee_body(admin_rights=int(AdminRights.VIEW_REPORTS))))
        ).value

        result = await service.set_admin_rights(db, employee.id, int(AdminRights.MANAGE_USERS))

        assert result.is_success
        assert employee.admin_rights == AdminRights.MANAGE_USERS

    async def test_invalid_rights_leave_mask_unchanged(self, db):
        service = EmployeeService(clock=lambda: NOW)
        employee = (
            await service.create_employee(db, EmployeeCreate(**employee_body(admin_rights=int(AdminRights.MANAGE_FLEET))))
        ).value

        result = await service.set_admin_rights(db, employee.id, 64)

        assert result.error.code == "employee.invalid_admin_rights"
        assert employee.admin_rights == AdminRights.MANAGE_FLEET

    async def test_unknown_employee(self, db):
        service = EmployeeService(clock=lambda: NOW)
        result = await service.deactivate(db, uuid.uuid4())
        assert result.error.kind is ErrorKind.NOT_FOUND


class TestEmployeeAPI:
    """직원 API."""

    async def test_create_employee(self, client: AsyncClient):
        res = await client.post(EMPLOYEES_URL, json=employee_body(admin_rights=3))
        assert res.status_code == 201
        data = res.json()
        assert data["admin_rights"] == 3
        assert data["admin_right_names"] == ["view_reports", "manage_fleet"]
        assert data["is_admin"] is True
        assert data["is_active"] is True
        assert data["deactivated_at"] is None

    async def test_employee_without_rights_is_not_admin(self, client: AsyncClient):
        res = await client.post(EMPLOYEES_URL, json=employee_body())
        assert res.json()["is_admin"] is False

    async def test_create_with_undefined_rights(self, client: AsyncClient):
        res = await client.post(EMPLOYEES_URL, json=employee_body(admin_rights=128))
        assert res.status_code == 400
        assert res.json()["detail"]["code"] == "employee.invalid_admin_rights"

    async def test_duplicate_personnel_number(self, client: AsyncClient):
        await client.post(EMPLOYEES_URL, json=employee_body())
        res = await client.post(EMPLOYEES_URL, json=employee_body(email="junho.lim@example.com"))
        assert res.status_code == 409
        assert res.json()["detail"]["code"] == "employee.personnel_number_exists"

    async def test_deactivate(self, client: AsyncClient):
        employee = (await client.post(EMPLOYEES_URL, json=employee_body())).json()

        res = await client.post(f"{EMPLOYEES_URL}/{employee['id']}/deactivate")
        assert res.status_code == 200
        assert res.json()["is_active"] is False
        assert res.json()["deactivated_at"] is not None

        res = await client.post(f"{EMPLOYEES_URL}/{employee['id']}/deactivate")
        assert res.status_code == 400
        assert res.json()["detail"]["code"] == "employee.already_deactivated"

    async def test_set_admin_rights(self, client: AsyncClient):
        employee = (await client.post(EMPLOYEES_URL, json=employee_body(admin_rights=31))).json()

        res = await client.put(f"{EMPLOYEES_URL}/{employee['id']}/admin-rights", json={"admin_rights": 4})
        assert res.status_code == 200
        assert res.json()["admin_right_names"] == ["manage_reservations"]

        res = await client.put(f"{EMPLOYEES_URL}/{employee['id']}/admin-rights", json={"admin_rights": 0})
        assert res.json()["is_admin"] is False

    async def test_list_filters_active(self, client: AsyncClient):
        first = (await client.post(EMPLOYEES_URL, json=employee_body())).json()
        await client.post(EMPLOYEES_URL, json=employee_body(personnel_number="E-1002", email="junho.lim@example.com"))
        await client.post(f"{EMPLOYEES_URL}/{first['id']}/deactivate")

        res = await client.get(EMPLOYEES_URL)
        assert res.json()["total"] == 2

        res = await client.get(EMPLOYEES_URL, params={"is_active": "true"})
        assert [e["personnel_number"] for e in res.json()["items"]] == ["E-1002"]

        res = await client.get(EMPLOYEES_URL, params={"keyword": "E-1001"})
        assert res.json()["total"] == 1

    async def test_get_missing(self, client: AsyncClient):
        res = await client.get(f"{EMPLOYEES_URL}/{uuid.uuid4()}")
        assert res.status_code == 404
        assert res.json()["detail"]["code"] == "employee.not_found"
