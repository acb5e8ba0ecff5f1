"""SQLAlchemy ORM 모델 패키지: 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package: Central import point for all domain models.
Importing from this package registers every model with Base.metadata,
which create_all_tables() relies on.

Modules:
    employee: 직원 (Employee records)
"""

from employee_api.models.employee import Employee

__all__ = ["Employee"]
