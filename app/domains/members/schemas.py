# app/domains/members/schemas.py

"""
'members' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
응답 스키마에는 비밀번호 해시가 포함되지 않습니다.
"""

import uuid
from typing import Optional

from app.core.schemas import (
    DateTimeOut,
    FormSchema,
    OptionalEmail,
    OptionalText,
    Password,
    PhoneNumber,
    ReadSchema,
    Username,
)


class ManagementBoardCreate(FormSchema):
    complexes_id: int
    name: OptionalText = None
    surname: OptionalText = None
    phone_number: PhoneNumber
    email: OptionalEmail = None
    address: OptionalText = None
    is_man: bool = False
    username: Username
    password: Password


class ManagementBoardRead(ReadSchema):
    id: int
    complexes_id: int
    name: Optional[str] = None
    surname: Optional[str] = None
    phone_number: str
    email: Optional[str] = None
    address: Optional[str] = None
    is_man: bool
    username: str
    device_id: uuid.UUID
    created_date: DateTimeOut
    updated_date: Optional[DateTimeOut] = None
