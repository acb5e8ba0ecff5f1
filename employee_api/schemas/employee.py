"""직원 관련 Pydantic 요청/응답 스키마 정의.

Employee Pydantic request/response schema definitions.
"""

from enum import Enum

from pydantic import BaseModel, Field


class EmployeeCreate(BaseModel):
    """직원 생성 요청 스키마.

    Employee creation request schema. All three fields are required.

    Attributes:
        first_name: 이름 (First name)
        last_name: 성 (Last name)
        email: 이메일 (Email address)
    """

    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=255)


class EmployeeUpdate(BaseModel):
    """직원 수정 요청 스키마 (부분 업데이트).

    Employee update request schema (partial update).
    """

    first_name: str | None = Field(default=None, min_length=1, max_length=255)
    last_name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, min_length=1, max_length=255)


class EmployeeResponse(BaseModel):
    """직원 응답 스키마.

    Employee response schema returned from API.
    """

    id: int  # 직원 ID (Store-generated identifier)
    first_name: str
    last_name: str
    email: str


class NameQueryStyle(str, Enum):
    """이름 검색 쿼리 방식 (Query authoring style for name lookups)."""

    JPQL = "jpql"  # 구조화 쿼리 + 위치 바인딩 (Structured query, positional)
    JPQL_NAMED = "jpql_named"  # 구조화 쿼리 + 이름 바인딩 (Structured query, named)
    NATIVE = "native"  # 원시 SQL + 위치 바인딩 (Raw SQL, positional)
    NATIVE_NAMED = "native_named"  # 원시 SQL + 이름 바인딩 (Raw SQL, named)


class MessageResponse(BaseModel):
    """단순 메시지 응답 (Plain message response)."""

    message: str
