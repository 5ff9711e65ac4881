# app/core/schemas.py

"""
도메인 스키마들이 공유하는 필드 타입과 기본 스키마 클래스를 정의하는 모듈입니다.

- 전화번호(+994 사업자 코드), 웹 주소, 길이 제한 문자열 등 선언적 필드 제약.
- 입력 스키마: camelCase 폼 필드를 snake_case 속성으로 받습니다. 빈 문자열은 값이 없는 것으로 처리합니다.
- 출력 스키마: ORM 객체에서 읽어 camelCase 키와 `yyyy-MM-dd[ HH:mm:ss]` 날짜 형식으로 직렬화합니다.
"""

import re
from datetime import date, datetime
from typing import Annotated, Any, Dict, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    PlainSerializer,
    StringConstraints,
)
from pydantic.alias_generators import to_camel

PHONE_PATTERN = re.compile(r"^\+994(50|51|55|99|70|77|60|40|12|88|22|24|36|25|18|23|26)\d{7}$")
WEB_PATTERN = re.compile(r"^(http(s)?://)?([a-zA-Z0-9-]+\.)+[a-zA-Z]{2,6}(/.*)?$")

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


# =============================================================================
# 1. 검증 함수
# =============================================================================
def blank_to_none(value: Any) -> Any:
    """빈 문자열(공백만 있는 경우 포함)을 None 으로 바꿉니다."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def validate_phone_number(value: str) -> str:
    if not PHONE_PATTERN.match(value):
        raise ValueError("Phone number must be in the format +994 followed by a valid operator code and 7 digits.")
    return value


def validate_web(value: str) -> str:
    if not WEB_PATTERN.match(value):
        raise ValueError("Invalid web domain format.")
    return value


# =============================================================================
# 2. 입력 필드 타입
# =============================================================================
PhoneNumber = Annotated[str, StringConstraints(strip_whitespace=True), AfterValidator(validate_phone_number)]
Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=100)]
Description = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=2500)]
Username = Annotated[str, StringConstraints(min_length=3, max_length=100)]
Password = Annotated[str, StringConstraints(min_length=8, max_length=20)]
ShortText = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)]
ImageUrl = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]
Web = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255), AfterValidator(validate_web)]

# 선택 입력. 빈 폼 값은 None 으로 처리합니다.
OptionalPhoneNumber = Annotated[Optional[PhoneNumber], BeforeValidator(blank_to_none)]
OptionalTitle = Annotated[Optional[Title], BeforeValidator(blank_to_none)]
OptionalDescription = Annotated[Optional[Description], BeforeValidator(blank_to_none)]
OptionalText = Annotated[Optional[ShortText], BeforeValidator(blank_to_none)]
OptionalImageUrl = Annotated[Optional[ImageUrl], BeforeValidator(blank_to_none)]
OptionalEmail = Annotated[Optional[EmailStr], BeforeValidator(blank_to_none)]
OptionalWeb = Annotated[Optional[Web], BeforeValidator(blank_to_none)]
OptionalDate = Annotated[Optional[date], BeforeValidator(blank_to_none)]

# =============================================================================
# 3. 출력 필드 타입
# =============================================================================
DateOut = Annotated[date, PlainSerializer(lambda v: v.strftime(DATE_FORMAT), return_type=str)]
DateTimeOut = Annotated[datetime, PlainSerializer(lambda v: v.strftime(DATETIME_FORMAT), return_type=str)]


# =============================================================================
# 4. 기본 스키마 클래스
# =============================================================================
class FormSchema(BaseModel):
    """
    multipart/form-data 또는 x-www-form-urlencoded 로 받는 입력 스키마의 기반 클래스.
    필드 이름은 camelCase 별칭(phoneNumber 등)으로 받습니다.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReadSchema(BaseModel):
    """ORM 객체를 camelCase JSON 으로 직렬화하는 출력 스키마의 기반 클래스."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    @classmethod
    def serialize(cls, db_obj: Any) -> Dict[str, Any]:
        return cls.model_validate(db_obj).model_dump(by_alias=True, mode="json")
