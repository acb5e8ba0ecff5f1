"""직원 레포지토리: 직원 CRUD 및 이름 기반 커스텀 쿼리.

Employee Repository: CRUD and custom name lookups for employees.

The same lookup (first_name AND last_name) is offered in four authoring
styles: structured query with positional binding, structured query with
named binding, native SQL with positional binding, and native SQL with
named binding. When several rows qualify, every lookup returns the row
with the lowest id.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from sqlalchemy import Select, bindparam, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.models.employee import Employee
from employee_api.repositories.base import FRESH_READ, BaseRepository

# 원시 SQL: 물리 컬럼명 기준 (Raw SQL against physical column names)
_NATIVE_NAMED_SQL: str = (
    "SELECT id, first_name, last_name, email FROM employees "
    "WHERE first_name = :first_name AND last_name = :last_name "
    "ORDER BY id LIMIT 1"
)
_NATIVE_POSITIONAL_SQL: str = (
    "SELECT id, first_name, last_name, email FROM employees "
    "WHERE first_name = {0} AND last_name = {1} "
    "ORDER BY id LIMIT 1"
)


def positional_placeholders(paramstyle: str, count: int) -> list[str]:
    """DB-API paramstyle에 맞는 위치 기반 플레이스홀더 목록을 만듭니다.

    Build `count` positional placeholders for a DB-API paramstyle
    (qmark: ?, numeric: :1, numeric_dollar: $1, format/pyformat: %s).

    Raises:
        ValueError: 위치 바인딩을 지원하지 않는 paramstyle (named-only paramstyle)
    """
    if paramstyle == "qmark":
        return ["?"] * count
    if paramstyle == "numeric":
        return [f":{i}" for i in range(1, count + 1)]
    if paramstyle == "numeric_dollar":
        return [f"${i}" for i in range(1, count + 1)]
    if paramstyle in ("format", "pyformat"):
        return ["%s"] * count
    raise ValueError(f"Paramstyle '{paramstyle}' does not support positional parameters")


class EmployeeRepositoryContract(ABC):
    """직원 데이터 접근 계약.

    Data-access contract for employees. Services depend on this interface
    only; read operations return None for absent rows and never raise
    for the not-found case.
    """

    @abstractmethod
    async def save(self, db: AsyncSession, employee: Employee) -> Employee:
        ...

    @abstractmethod
    async def find_all(self, db: AsyncSession) -> list[Employee]:
        ...

    @abstractmethod
    async def find_by_id(self, db: AsyncSession, employee_id: int) -> Employee | None:
        ...

    @abstractmethod
    async def find_by_email(self, db: AsyncSession, email: str) -> Employee | None:
        ...

    @abstractmethod
    async def delete_by_id(self, db: AsyncSession, employee_id: int) -> None:
        ...

    @abstractmethod
    async def find_by_jpql(self, db: AsyncSession, first_name: str, last_name: str) -> Employee | None:
        ...

    @abstractmethod
    async def find_by_jpql_named_params(
        self, db: AsyncSession, first_name: str, last_name: str
    ) -> Employee | None:
        ...

    @abstractmethod
    async def find_by_native_sql(self, db: AsyncSession, first_name: str, last_name: str) -> Employee | None:
        ...

    @abstractmethod
    async def find_by_native_sql_named(
        self, db: AsyncSession, first_name: str, last_name: str
    ) -> Employee | None:
        ...


class EmployeeRepository(BaseRepository[Employee], EmployeeRepositoryContract):
    """employees 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the employees table.
    """

    def __init__(self) -> None:
        super().__init__(Employee)

    async def find_all(self, db: AsyncSession) -> list[Employee]:
        """모든 직원을 ID 순으로 조회합니다. 없으면 빈 목록.

        Retrieve every employee ordered by id; an empty list when none exist.
        """
        employees: Sequence[Employee] = await self.get_all(db, order_by=Employee.id)
        return list(employees)

    async def find_by_id(self, db: AsyncSession, employee_id: int) -> Employee | None:
        return await self.get_by_id(db, employee_id)

    async def find_by_email(self, db: AsyncSession, email: str) -> Employee | None:
        """이메일로 직원을 조회합니다. 중복 시 ID가 가장 작은 직원.

        Retrieve the employee with the given email. Email is not unique at
        the schema level, so the lowest id wins.
        """
        return await self.get_first(db, {"email": email})

    async def delete_by_id(self, db: AsyncSession, employee_id: int) -> None:
        """직원을 삭제합니다. 존재하지 않으면 아무것도 하지 않습니다.

        Delete the employee if present; absent ids are a no-op.
        """
        await self.delete(db, employee_id)

    async def find_by_jpql(
        self,
        db: AsyncSession,
        first_name: str,
        last_name: str,
    ) -> Employee | None:
        """구조화 쿼리 + 위치 기반 바인딩으로 이름 검색.

        Structured query over mapped attributes; the values are bound as
        anonymous parameters in predicate order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            first_name: 이름 (First name)
            last_name: 성 (Last name)

        Returns:
            Employee | None: 일치하는 직원 또는 None (Matching employee or None)
        """
        query: Select = (
            select(Employee)
            .where(Employee.first_name == first_name, Employee.last_name == last_name)
            .order_by(Employee.id)
            .limit(1)
        )
        result = await db.execute(query, execution_options=FRESH_READ)
        return result.scalars().first()

    async def find_by_jpql_named_params(
        self,
        db: AsyncSession,
        first_name: str,
        last_name: str,
    ) -> Employee | None:
        """구조화 쿼리 + 이름 기반 바인딩으로 이름 검색.

        Structured query with named bind parameters; the values are supplied
        by name at execution time.
        """
        query: Select = (
            select(Employee)
            .where(
                Employee.first_name == bindparam("first_name"),
                Employee.last_name == bindparam("last_name"),
            )
            .order_by(Employee.id)
            .limit(1)
        )
        result = await db.execute(
            query, {"first_name": first_name, "last_name": last_name}, execution_options=FRESH_READ
        )
        return result.scalars().first()

    async def find_by_native_sql(
        self,
        db: AsyncSession,
        first_name: str,
        last_name: str,
    ) -> Employee | None:
        """원시 SQL + 위치 기반 바인딩으로 이름 검색.

        Raw SQL with positional placeholders rendered in the driver's own
        paramstyle and sent through exec_driver_sql. The returned Employee
        is built from the row and is not attached to the session.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            first_name: 이름 (First name)
            last_name: 성 (Last name)

        Returns:
            Employee | None: 일치하는 직원 또는 None (Matching employee or None)
        """
        paramstyle: str = db.get_bind().dialect.paramstyle
        sql: str = _NATIVE_POSITIONAL_SQL.format(*positional_placeholders(paramstyle, 2))

        # exec_driver_sql은 autoflush를 거치지 않음: pending changes must reach the store first
        await db.flush()
        conn = await db.connection()
        result = await conn.exec_driver_sql(sql, (first_name, last_name))
        row = result.mappings().first()
        if row is None:
            return None
        return Employee(**dict(row))

    async def find_by_native_sql_named(
        self,
        db: AsyncSession,
        first_name: str,
        last_name: str,
    ) -> Employee | None:
        """원시 SQL + 이름 기반 바인딩으로 이름 검색.

        Raw SQL text with :first_name / :last_name placeholders, mapped back
        onto Employee through from_statement().
        """
        query = select(Employee).from_statement(text(_NATIVE_NAMED_SQL))
        result = await db.execute(
            query, {"first_name": first_name, "last_name": last_name}, execution_options=FRESH_READ
        )
        return result.scalars().first()


# 싱글턴 인스턴스: Singleton instance
employee_repository: EmployeeRepository = EmployeeRepository()
