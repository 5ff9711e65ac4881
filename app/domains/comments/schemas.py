# app/domains/comments/schemas.py

"""
'comments' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional

from app.core.schemas import (
    DateTimeOut,
    FormSchema,
    OptionalDescription,
    OptionalEmail,
    OptionalTitle,
    PhoneNumber,
    ReadSchema,
)


class CommentCreate(FormSchema):
    name: OptionalTitle = None
    phone_number: PhoneNumber
    email: OptionalEmail = None
    description: OptionalDescription = None


class CommentRead(ReadSchema):
    id: int
    name: Optional[str] = None
    phone_number: str
    email: Optional[str] = None
    description: Optional[str] = None
    created_date: DateTimeOut
