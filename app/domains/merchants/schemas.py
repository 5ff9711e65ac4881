# app/domains/merchants/schemas.py

"""
'merchants' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional

from app.core.schemas import (
    DateTimeOut,
    FormSchema,
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


class MerchantCreate(FormSchema):
    title: OptionalTitle = None
    address: OptionalText = None
    phone_number: PhoneNumber
    email: OptionalEmail = None
    web: OptionalWeb = None
    image: OptionalImageUrl = None
    description: OptionalDescription = None


class MerchantUpdate(FormSchema):
    title: OptionalTitle = None
    address: OptionalText = None
    phone_number: OptionalPhoneNumber = None
    email: OptionalEmail = None
    web: OptionalWeb = None
    image: OptionalImageUrl = None
    description: OptionalDescription = None


class MerchantRead(ReadSchema):
    id: int
    title: Optional[str] = None
    address: Optional[str] = None
    phone_number: str
    email: Optional[str] = None
    web: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    created_date: DateTimeOut
    updated_date: Optional[DateTimeOut] = None
