# app/domains/merchants/models.py

"""
'merchants' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

from typing import Optional
from sqlmodel import Field, SQLModel

from app.core.database_base import SoftDeleteBase, TimestampBase, lifecycle_check


class MerchantBase(SQLModel):
    """
    merchants 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    title: Optional[str] = Field(default=None, max_length=100, description="상점명")
    address: Optional[str] = Field(default=None, max_length=255)
    phone_number: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    web: Optional[str] = Field(default=None, max_length=255)
    image: Optional[str] = Field(default=None, max_length=500, description="이미지 URL")
    description: Optional[str] = Field(default=None, max_length=2500)


class Merchant(MerchantBase, TimestampBase, SoftDeleteBase, table=True):
    """
    merchants 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "merchants"
    __table_args__ = (lifecycle_check("merchants"),)
