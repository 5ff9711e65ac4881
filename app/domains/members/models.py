# app/domains/members/models.py

"""
'members' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
"""

import uuid
from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel

from app.core.database_base import TimestampBase


# =============================================================================
# management_boards 테이블 모델
# =============================================================================
class ManagementBoardBase(SQLModel):
    """
    management_boards 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True)
    complexes_id: int = Field(foreign_key="complexes.id", description="소속 단지 ID")
    name: Optional[str] = Field(default=None, max_length=255)
    surname: Optional[str] = Field(default=None, max_length=255)
    phone_number: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    address: Optional[str] = Field(default=None, max_length=255)
    is_man: bool = Field(default=False)
    # 대소문자를 구분하는 고유 사용자명
    username: str = Field(max_length=100, unique=True, index=True)
    device_id: uuid.UUID = Field(description="등록 단말기 식별자")


class ManagementBoard(ManagementBoardBase, TimestampBase, table=True):
    """
    management_boards 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "management_boards"

    password_hash: str = Field(max_length=255, description="bcrypt 해시")
