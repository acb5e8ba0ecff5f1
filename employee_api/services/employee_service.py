"""직원 서비스: 직원 CRUD 비즈니스 로직.

Employee Service: Business logic for employee CRUD operations.
Converts absent repository results into ResourceNotFoundException.
"""

from collections.abc import Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.models.employee import Employee
from employee_api.repositories.employee_repository import (
    EmployeeRepositoryContract,
    employee_repository,
)
from employee_api.schemas.employee import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    NameQueryStyle,
)
from employee_api.utils.exceptions import DuplicateError, ResourceNotFoundException


class EmployeeService:
    """직원 관련 비즈니스 로직을 처리하는 서비스.

    Service handling employee business logic. Depends only on the
    repository contract.
    """

    def __init__(self, repository: EmployeeRepositoryContract) -> None:
        self.repository: EmployeeRepositoryContract = repository

    def _to_response(self, employee: Employee) -> EmployeeResponse:
        """직원 모델을 응답 스키마로 변환합니다.

        Convert an Employee model instance to an EmployeeResponse schema.
        """
        return EmployeeResponse(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
        )

    async def _get_or_raise(self, db: AsyncSession, employee_id: int) -> Employee:
        employee: Employee | None = await self.repository.find_by_id(db, employee_id)
        if employee is None:
            raise ResourceNotFoundException(f"Employee not found with id: {employee_id}")
        return employee

    async def save_employee(
        self,
        db: AsyncSession,
        data: EmployeeCreate,
    ) -> EmployeeResponse:
        """새 직원을 등록합니다.

        Register a new employee.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 직원 생성 데이터 (Employee creation data)

        Returns:
            EmployeeResponse: 생성된 직원 응답 (Created employee response)

        Raises:
            DuplicateError: 같은 이메일의 직원이 이미 존재할 때
                            (When an employee with the same email already exists)
        """
        existing: Employee | None = await self.repository.find_by_email(db, data.email)
        if existing is not None:
            raise DuplicateError(f"Employee already exists with email: {data.email}")

        employee: Employee = await self.repository.save(db, Employee(**data.model_dump()))
        return self._to_response(employee)

    async def get_all_employees(self, db: AsyncSession) -> list[EmployeeResponse]:
        """Return every employee."""
        employees: list[Employee] = await self.repository.find_all(db)
        return [self._to_response(e) for e in employees]

    async def get_employee_by_id(
        self,
        db: AsyncSession,
        employee_id: int,
    ) -> EmployeeResponse:
        """ID로 직원을 조회합니다.

        Retrieve an employee by id.

        Raises:
            ResourceNotFoundException: 직원을 찾을 수 없을 때 (Employee not found)
        """
        employee: Employee = await self._get_or_raise(db, employee_id)
        return self._to_response(employee)

    async def update_employee(
        self,
        db: AsyncSession,
        employee_id: int,
        data: EmployeeUpdate,
    ) -> EmployeeResponse:
        """직원 정보를 수정합니다.

        Update an existing employee. Only fields present in the request
        are overwritten; the id never changes.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            employee_id: 직원 ID (Employee id)
            data: 수정 데이터 (Update data)

        Returns:
            EmployeeResponse: 수정된 직원 응답 (Updated employee response)

        Raises:
            ResourceNotFoundException: 직원을 찾을 수 없을 때 (Employee not found)
        """
        employee: Employee = await self._get_or_raise(db, employee_id)

        for field, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(employee, field, value)

        updated: Employee = await self.repository.save(db, employee)
        return self._to_response(updated)

    async def delete_employee(self, db: AsyncSession, employee_id: int) -> None:
        """직원을 삭제합니다.

        Delete an employee by id.

        Raises:
            ResourceNotFoundException: 직원을 찾을 수 없을 때 (Employee not found)
        """
        await self._get_or_raise(db, employee_id)
        await self.repository.delete_by_id(db, employee_id)

    async def find_employee_by_name(
        self,
        db: AsyncSession,
        first_name: str,
        last_name: str,
        style: NameQueryStyle = NameQueryStyle.JPQL,
    ) -> EmployeeResponse:
        """이름으로 직원을 검색합니다. 쿼리 방식은 style로 선택.

        Look up an employee by first and last name using the chosen query
        style. All styles share one predicate and return the same row.

        Raises:
            ResourceNotFoundException: 일치하는 직원이 없을 때 (No matching employee)
        """
        lookups: dict[NameQueryStyle, Callable[[AsyncSession, str, str], Awaitable[Employee | None]]] = {
            NameQueryStyle.JPQL: self.repository.find_by_jpql,
            NameQueryStyle.JPQL_NAMED: self.repository.find_by_jpql_named_params,
            NameQueryStyle.NATIVE: self.repository.find_by_native_sql,
            NameQueryStyle.NATIVE_NAMED: self.repository.find_by_native_sql_named,
        }
        employee: Employee | None = await lookups[style](db, first_name, last_name)
        if employee is None:
            raise ResourceNotFoundException(
                f"Employee not found with name: {first_name} {last_name}"
            )
        return self._to_response(employee)


# 싱글턴 인스턴스: Singleton instance
employee_service: EmployeeService = EmployeeService(employee_repository)
