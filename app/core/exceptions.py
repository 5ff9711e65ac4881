# app/core/exceptions.py

"""
API 예외 클래스와 애플리케이션 수준 예외 처리기를 정의하는 모듈입니다.

- 라우터는 `BadRequestException`, `ResourceNotFoundException`(HTTPException 하위 클래스)을 발생시킵니다.
- `http_exception_handler`: dict 형태의 detail 은 응답 본문으로 그대로 사용합니다.
- `validation_exception_handler`: 요청 검증 실패를 400 INVALID_DATA 봉투로 변환합니다.
- `error_boundary`: 그 외 모든 예외를 500 봉투와 상관관계 ID(requestId)로 변환하는 미들웨어입니다.
"""

import logging
import uuid
from typing import Any, Dict, List, Optional, Sequence, Union

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.responses import error_envelope, not_found_body, server_error_body

logger = logging.getLogger(__name__)

INVALID_DATA = "INVALID_DATA"

# 요청 위치 접두어. 필드 이름만 남기기 위해 제거합니다.
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie", "form"}

_STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: "BAD_REQUEST",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


# =============================================================================
# 1. API 예외 클래스
# =============================================================================
class BadRequestException(HTTPException):
    """업무 규칙 위반 (INVALID_PAGE, NO_UPDATE, USERNAME_TAKEN 등)."""

    def __init__(self, code: str, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error_envelope(status.HTTP_400_BAD_REQUEST, code, message, errors),
        )
        self.code = code


class ResourceNotFoundException(HTTPException):
    """ID 로 조회한 레코드가 없을 때. 요청된 ID 를 rejectedValue 로 돌려줍니다."""

    def __init__(self, rejected_value: Any, field: str = "id"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=not_found_body(rejected_value, field=field),
        )
        self.rejected_value = rejected_value


# =============================================================================
# 2. 예외 처리기
# =============================================================================
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        body = exc.detail
    else:
        code = _STATUS_CODES.get(exc.status_code, "ERROR")
        body = error_envelope(exc.status_code, code, str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


def _field_name(loc: Sequence[Union[str, int]]) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "request"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    폼 필드, 쿼리/경로 파라미터, 헤더 검증 실패를 필드별 메시지 목록으로 반환합니다.
    """
    errors = [
        {"field": _field_name(error.get("loc", ())), "message": error.get("msg", "Invalid value")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope(status.HTTP_400_BAD_REQUEST, INVALID_DATA, "Invalid input data.", errors),
    )


async def error_boundary(request: Request, call_next):
    """
    처리되지 않은 예외를 500 응답으로 바꾸는 HTTP 미들웨어입니다.
    예외 상세는 requestId 와 함께 로그에만 남깁니다.
    """
    try:
        return await call_next(request)
    except Exception:
        request_id = str(uuid.uuid4())
        logger.exception(
            "Unhandled error on %s %s (requestId=%s)", request.method, request.url.path, request_id
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=server_error_body(request_id),
        )
