# app/core/database_base.py

"""
모든 도메인 테이블 모델이 공유하는 SQLModel 기반 클래스(Mixin)를 정의하는 모듈입니다.

- `TimestampBase`: 생성/수정 일시 컬럼.
- `SoftDeleteBase`: 활성 플래그와 비활성화 일시 컬럼, 그리고 이 둘을 하나의
  생명주기 값(`Active` | `Deactivated(at)`)으로 노출하는 헬퍼.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from sqlalchemy import CheckConstraint, DateTime
from sqlmodel import Field, SQLModel


# =============================================================================
# 1. 생명주기 상태 (Lifecycle)
# =============================================================================
@dataclass(frozen=True)
class Active:
    """활성 상태. 목록 조회에 포함됩니다."""


@dataclass(frozen=True)
class Deactivated:
    """비활성(소프트 삭제) 상태. 종료 상태이며 다시 활성으로 돌아가지 않습니다."""
    at: datetime


Lifecycle = Union[Active, Deactivated]


def lifecycle_check(table_name: str) -> CheckConstraint:
    """is_active = false 인데 deactivated_date 가 비어 있는 행을 DB 수준에서 막는 제약 조건."""
    return CheckConstraint(
        "is_active OR deactivated_date IS NOT NULL",
        name=f"ck_{table_name}_lifecycle",
    )


# =============================================================================
# 2. 공통 컬럼 Mixin
# =============================================================================
class TimestampBase(SQLModel):
    """
    생성/수정 일시 컬럼. 서버 로컬 시각(naive)으로 기록합니다.
    updated_date 는 생성 시 None 입니다.
    """
    created_date: datetime = Field(
        default_factory=datetime.now, nullable=False, sa_type=DateTime(timezone=False), description="레코드 생성 일시"
    )
    updated_date: Optional[datetime] = Field(
        default=None, sa_type=DateTime(timezone=False), description="레코드 마지막 수정 일시"
    )


class SoftDeleteBase(SQLModel):
    """
    소프트 삭제 가능한 테이블의 공통 컬럼입니다.
    두 컬럼은 `deactivate()`를 통해서만 함께 변경되어야 합니다.
    """
    is_active: bool = Field(default=True, nullable=False, index=True, description="활성 여부")
    deactivated_date: Optional[datetime] = Field(
        default=None, sa_type=DateTime(timezone=False), description="비활성화 일시"
    )

    @property
    def lifecycle(self) -> Lifecycle:
        if self.is_active:
            return Active()
        return Deactivated(at=self.deactivated_date)

    def deactivate(self, at: Optional[datetime] = None) -> datetime:
        """
        레코드를 비활성 상태로 전환하고 저장된 비활성화 시각을 반환합니다.
        이미 비활성인 경우 최초 비활성화 시각을 유지하고 그 값을 돌려줍니다.
        """
        at = at or datetime.now()
        if self.is_active or self.deactivated_date is None:
            self.deactivated_date = at
        self.is_active = False
        return self.deactivated_date
