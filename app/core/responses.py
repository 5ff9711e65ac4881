# app/core/responses.py

"""
모든 엔드포인트가 공유하는 응답 봉투(envelope) 생성 함수 모듈입니다.

성공 응답: `{messages: [{status, code, message}], details?, pagination?}`
실패 응답(업무 규칙/검증): `{messages: [{status, code, message, errors?}]}`
404 응답: `{errorObjectType: "Resource", errorCode: "NOT_FOUND", ...}`
500 응답: `{errorObjectType: "SERVER", errorCode: "INTERNAL_SERVER_ERROR", ...}`
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

SUCCESS_CODE = "SUCCESS"
DEFAULT_SUCCESS_MESSAGE = "Successfully processed"


def utc_timestamp() -> str:
    """UTC 기준 ISO-8601 타임스탬프 문자열."""
    return datetime.now(timezone.utc).isoformat()


def message_item(status: int, code: str, message: str) -> Dict[str, Any]:
    return {"status": status, "code": code, "message": message}


def success_envelope(
    details: Any = None,
    message: str = DEFAULT_SUCCESS_MESSAGE,
    pagination: Optional[Dict[str, int]] = None,
) -> Dict[str, Any]:
    """
    200 성공 응답 본문을 만듭니다.
    details 가 None 이면(삭제 응답 등) 키 자체를 생략합니다.
    """
    body: Dict[str, Any] = {"messages": [message_item(200, SUCCESS_CODE, message)]}
    if details is not None:
        body["details"] = details
    if pagination is not None:
        body["pagination"] = pagination
    return body


def error_envelope(
    status: int,
    code: str,
    message: str,
    errors: Optional[List[Dict[str, str]]] = None,
) -> Dict[str, Any]:
    """검증 오류 및 업무 규칙 위반(4xx) 응답 본문."""
    item = message_item(status, code, message)
    if errors is not None:
        item["errors"] = errors
    return {"messages": [item]}


def not_found_body(rejected_value: Any, field: str = "id") -> Dict[str, Any]:
    """존재하지 않는 리소스 ID 에 대한 404 본문. 요청된 값을 그대로 되돌려 줍니다."""
    return {
        "errorObjectType": "Resource",
        "errorCode": "NOT_FOUND",
        "message": "The requested resource was not found.",
        "status": 404,
        "errorData": [
            {"field": field, "rejectedValue": str(rejected_value), "error": "No record found for this ID."}
        ],
        "timestamp": utc_timestamp(),
    }


def server_error_body(request_id: str) -> Dict[str, Any]:
    """
    처리되지 않은 예외에 대한 500 본문.
    내부 예외 내용은 포함하지 않고, 로그 추적용 requestId 만 노출합니다.
    """
    return {
        "errorObjectType": "SERVER",
        "errorCode": "INTERNAL_SERVER_ERROR",
        "message": "An unexpected error occurred while processing your request.",
        "status": 500,
        "errorData": [{"requestId": request_id}],
        "timestamp": utc_timestamp(),
    }
