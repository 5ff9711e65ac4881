# app/domains/complexes/models.py

"""
'complexes' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

단지 레코드는 물리적으로 삭제되지 않습니다. 삭제 요청은 is_active=false 로 전환하고
updated_date 와 deactivated_date 를 같은 시각으로 기록합니다.
"""

from typing import Optional
from datetime import date
from sqlmodel import Field, SQLModel

from app.core.database_base import SoftDeleteBase, TimestampBase, lifecycle_check


# =============================================================================
# complexes 테이블 모델
# =============================================================================
class ComplexBase(SQLModel):
    """
    complexes 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    title: Optional[str] = Field(default=None, max_length=100, description="단지명")
    address: Optional[str] = Field(default=None, max_length=255)
    phone_number: str = Field(max_length=255, description="+994 형식 전화번호")
    email: Optional[str] = Field(default=None, max_length=255)
    web: Optional[str] = Field(default=None, max_length=255, description="웹 주소")
    description: Optional[str] = Field(default=None, max_length=2500)
    open_year: date = Field(description="준공(개장) 일자")
    image: Optional[str] = Field(default=None, max_length=500, description="이미지 URL")


class Complex(ComplexBase, TimestampBase, SoftDeleteBase, table=True):
    """
    complexes 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "complexes"
    __table_args__ = (lifecycle_check("complexes"),)
