"""직원 라우터: 직원 CRUD 및 이름 검색 엔드포인트.

Employee Router: CRUD and name-lookup endpoints for employees.
Routes commit the session after mutating service calls.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.database import get_db
from employee_api.schemas.employee import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeUpdate,
    MessageResponse,
    NameQueryStyle,
)
from employee_api.services.employee_service import employee_service

router: APIRouter = APIRouter()


@router.post("", response_model=EmployeeResponse, status_code=201)
async def create_employee(
    data: EmployeeCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeResponse:
    """새 직원을 등록합니다. 이메일 중복 시 409.

    Create a new employee. Returns 409 when the email is already registered.
    """
    result: EmployeeResponse = await employee_service.save_employee(db, data)
    await db.commit()
    return result


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[EmployeeResponse]:
    """직원 목록을 조회합니다.

    List all employees.
    """
    return await employee_service.get_all_employees(db)


@router.get("/search", response_model=EmployeeResponse)
async def search_employee_by_name(
    db: Annotated[AsyncSession, Depends(get_db)],
    first_name: Annotated[str, Query(min_length=1)],
    last_name: Annotated[str, Query(min_length=1)],
    style: NameQueryStyle = NameQueryStyle.JPQL,
) -> EmployeeResponse:
    """이름으로 직원을 검색합니다. style로 쿼리 방식 선택.

    Look up an employee by first and last name with the given query style.
    """
    return await employee_service.find_employee_by_name(db, first_name, last_name, style)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeResponse:
    """직원 상세 정보를 조회합니다.

    Retrieve an employee by id.
    """
    return await employee_service.get_employee_by_id(db, employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    data: EmployeeUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeResponse:
    """직원 정보를 수정합니다.

    Update an existing employee.
    """
    result: EmployeeResponse = await employee_service.update_employee(db, employee_id, data)
    await db.commit()
    return result


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """직원을 삭제합니다.

    Delete an employee by id.
    """
    await employee_service.delete_employee(db, employee_id)
    await db.commit()
    return MessageResponse(message="Employee deleted successfully!")
