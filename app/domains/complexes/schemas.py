# app/domains/complexes/schemas.py

"""
'complexes' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
입력은 폼 필드(camelCase), 응답은 '...Read' 패턴을 사용합니다.
"""

from typing import Optional
from datetime import date

from app.core.schemas import (
    DateOut,
    DateTimeOut,
    FormSchema,
    OptionalDate,
    OptionalDescription,
    OptionalEmail,
    OptionalImageUrl,
    OptionalPhoneNumber,
    OptionalText,
    OptionalTitle,
    OptionalWeb,
    PhoneNumber,
    ReadSchema,
)


class ComplexCreate(FormSchema):
    title: OptionalTitle = None
    address: OptionalText = None
    phone_number: PhoneNumber
    email: OptionalEmail = None
    web: OptionalWeb = None
    description: OptionalDescription = None
    open_year: date
    image: OptionalImageUrl = None


class ComplexUpdate(FormSchema):
    """부분 수정. 값이 있고 현재 값과 다른 필드만 반영됩니다."""
    title: OptionalTitle = None
    address: OptionalText = None
    phone_number: OptionalPhoneNumber = None
    email: OptionalEmail = None
    web: OptionalWeb = None
    description: OptionalDescription = None
    open_year: OptionalDate = None
    image: OptionalImageUrl = None


class ComplexRead(ReadSchema):
    id: int
    title: Optional[str] = None
    address: Optional[str] = None
    phone_number: str
    email: Optional[str] = None
    web: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    open_year: DateOut
    created_date: DateTimeOut
    updated_date: Optional[DateTimeOut] = None
