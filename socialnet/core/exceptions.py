# socialnet/core/exceptions.py
"""
서비스 계층이 발생시키는 도메인 예외 정의.

서비스는 HTTP 상태 코드를 알 필요가 없습니다. status_code와 error_code는
app/__init__.py의 전역 에러 핸들러가 응답을 만들 때만 사용합니다.
"""


class DomainError(Exception):
    """모든 도메인 예외의 기반 클래스."""
    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """참조한 게시글이 존재하지 않는 경우."""
    status_code = 404
    error_code = "POST_NOT_FOUND"


class ConflictError(DomainError):
    """이미 같은 상태가 적용되어 있어 다시 적용할 수 없는 경우 (중복 좋아요)."""
    status_code = 409
    error_code = "CONFLICT"


class DomainValidationError(DomainError):
    """잘못된 입력이거나 권한이 없는 작업을 시도한 경우 (예: 작성자가 아닌 사용자의 삭제)."""
    status_code = 400
    error_code = "VALIDATION_ERROR"
