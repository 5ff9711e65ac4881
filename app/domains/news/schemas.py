# app/domains/news/schemas.py

"""
'news' 도메인의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import date

from app.core.schemas import (
    DateOut,
    DateTimeOut,
    FormSchema,
    OptionalDate,
    OptionalDescription,
    OptionalImageUrl,
    OptionalTitle,
    ReadSchema,
)


class LatestNewsCreate(FormSchema):
    title: OptionalTitle = None
    image: OptionalImageUrl = None
    news_time: date
    description: OptionalDescription = None


class LatestNewsUpdate(FormSchema):
    title: OptionalTitle = None
    image: OptionalImageUrl = None
    news_time: OptionalDate = None
    description: OptionalDescription = None


class LatestNewsRead(ReadSchema):
    id: int
    title: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    news_time: DateOut
    created_date: DateTimeOut
    updated_date: Optional[DateTimeOut] = None
