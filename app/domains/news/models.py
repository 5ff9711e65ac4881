# app/domains/news/models.py

"""
'news' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import date
from sqlmodel import Field, SQLModel

from app.core.database_base import SoftDeleteBase, TimestampBase, lifecycle_check


class LatestNewsBase(SQLModel):
    """
    latest_news 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    title: Optional[str] = Field(default=None, max_length=100, description="소식 제목")
    image: Optional[str] = Field(default=None, max_length=500, description="이미지 URL")
    news_time: date = Field(description="소식 일자")
    description: Optional[str] = Field(default=None, max_length=2500)


class LatestNews(LatestNewsBase, TimestampBase, SoftDeleteBase, table=True):
    """
    latest_news 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "latest_news"
    __table_args__ = (lifecycle_check("latest_news"),)
