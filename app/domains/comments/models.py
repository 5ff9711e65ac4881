# app/domains/comments/models.py

"""
'comments' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.database_base import SoftDeleteBase, lifecycle_check


class CommentBase(SQLModel):
    """
    comments 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    name: Optional[str] = Field(default=None, max_length=100, description="작성자 이름")
    phone_number: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None, max_length=2500, description="의견 본문")
    created_date: datetime = Field(default_factory=datetime.now, nullable=False, sa_type=DateTime(timezone=False))


class Comment(CommentBase, SoftDeleteBase, table=True):
    """
    comments 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "comments"
    __table_args__ = (lifecycle_check("comments"),)
