"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses raised by the service
layer. Repositories never raise these; they return None for absent rows.

Usage:
    from employee_api.utils.exceptions import ResourceNotFoundException, DuplicateError
    raise ResourceNotFoundException("Employee not found with id: 7")
    raise DuplicateError("Employee already exists with email: a@b.c")
"""

from fastapi import HTTPException, status


class ResourceNotFoundException(HTTPException):
    """404 Not Found 예외: 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception carrying a human-readable message and an
    optional underlying cause. The cause is also chained as __cause__.

    Args:
        message: 오류 메시지 (Error message)
        cause: 원인 예외 (Wrapped underlying exception, optional)
    """

    def __init__(self, message: str = "Resource not found", cause: BaseException | None = None) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=message)
        self.message: str = message
        self.cause: BaseException | None = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class DuplicateError(HTTPException):
    """409 Conflict 예외: 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when creating an employee whose email is already registered.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
