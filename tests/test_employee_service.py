"""직원 서비스 테스트.

Employee service tests: not-found translation, duplicate email, and
query-style dispatch. The service is exercised against both the real
repository and a mocked repository contract.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.models import Employee
from employee_api.repositories.employee_repository import EmployeeRepositoryContract
from employee_api.schemas.employee import EmployeeCreate, EmployeeUpdate, NameQueryStyle
from employee_api.services.employee_service import EmployeeService, employee_service
from employee_api.utils.exceptions import DuplicateError, ResourceNotFoundException


def _create_data(**overrides) -> EmployeeCreate:
    data = {"first_name": "first_name_test", "last_name": "last_name_test", "email": "email_test"}
    data.update(overrides)
    return EmployeeCreate(**data)


class TestEmployeeServiceCrud:
    """서비스 CRUD 테스트: 실제 레포지토리 사용."""

    async def test_save_and_get(self, db: AsyncSession):
        created = await employee_service.save_employee(db, _create_data())
        fetched = await employee_service.get_employee_by_id(db, created.id)
        assert fetched == created

    async def test_save_duplicate_email(self, db: AsyncSession):
        """이메일 중복 시 DuplicateError."""
        await employee_service.save_employee(db, _create_data())
        with pytest.raises(DuplicateError) as exc_info:
            await employee_service.save_employee(db, _create_data(first_name="Other"))
        assert exc_info.value.status_code == 409

    async def test_get_missing_raises_not_found(self, db: AsyncSession):
        """없는 직원 조회 시 ResourceNotFoundException."""
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await employee_service.get_employee_by_id(db, 42)
        assert exc_info.value.message == "Employee not found with id: 42"

    async def test_update_only_set_fields(self, db: AsyncSession):
        created = await employee_service.save_employee(db, _create_data())
        updated = await employee_service.update_employee(
            db, created.id, EmployeeUpdate(email="test@gmail.com")
        )
        assert updated.email == "test@gmail.com"
        assert updated.first_name == created.first_name
        assert updated.id == created.id

    async def test_delete_then_missing(self, db: AsyncSession):
        created = await employee_service.save_employee(db, _create_data())
        await employee_service.delete_employee(db, created.id)
        with pytest.raises(ResourceNotFoundException):
            await employee_service.delete_employee(db, created.id)

    async def test_get_all(self, db: AsyncSession):
        await employee_service.save_employee(db, _create_data())
        await employee_service.save_employee(db, _create_data(email="second@test.com"))
        assert len(await employee_service.get_all_employees(db)) == 2

    @pytest.mark.parametrize("style", list(NameQueryStyle))
    async def test_find_by_name_each_style(self, db: AsyncSession, style):
        created = await employee_service.save_employee(db, _create_data())
        found = await employee_service.find_employee_by_name(
            db, "first_name_test", "last_name_test", style
        )
        assert found == created


class TestEmployeeServiceDispatch:
    """레포지토리 계약 모킹: 쿼리 방식별 호출 확인."""

    def _service(self) -> tuple[EmployeeService, Mock]:
        repository = Mock(spec=EmployeeRepositoryContract)
        for name in (
            "find_by_jpql",
            "find_by_jpql_named_params",
            "find_by_native_sql",
            "find_by_native_sql_named",
        ):
            setattr(repository, name, AsyncMock(return_value=None))
        return EmployeeService(repository), repository

    @pytest.mark.parametrize(
        "style, method_name",
        [
            (NameQueryStyle.JPQL, "find_by_jpql"),
            (NameQueryStyle.JPQL_NAMED, "find_by_jpql_named_params"),
            (NameQueryStyle.NATIVE, "find_by_native_sql"),
            (NameQueryStyle.NATIVE_NAMED, "find_by_native_sql_named"),
        ],
    )
    async def test_dispatch(self, style, method_name):
        service, repository = self._service()
        employee = Employee(id=7, first_name="A", last_name="B", email="a@b.c")
        getattr(repository, method_name).return_value = employee
        db = Mock(spec=AsyncSession)

        result = await service.find_employee_by_name(db, "A", "B", style)

        assert result.id == 7
        getattr(repository, method_name).assert_awaited_once_with(db, "A", "B")

    async def test_not_found(self):
        service, _ = self._service()
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await service.find_employee_by_name(Mock(spec=AsyncSession), "A", "B")
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Employee not found with name: A B"
