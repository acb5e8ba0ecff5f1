"""API 라우터 패키지: 모든 엔드포인트 통합.

API Router package: Aggregates all endpoints into a single router
for inclusion in the FastAPI application.

Included routers:
    - employees: 직원 관리 (Employee management)
"""

from fastapi import APIRouter

from employee_api.api.employees import router as employees_router

api_router: APIRouter = APIRouter()
api_router.include_router(employees_router, prefix="/employees", tags=["Employees"])
