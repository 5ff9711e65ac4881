# app/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.
모든 메서드는 비동기(async) 환경에 맞게 작성되었습니다.

- 목록 조회는 id 내림차순이며, 소프트 삭제 가능한 모델은 활성 레코드만 대상으로 합니다.
- 수정은 로드된 레코드와 입력값의 차이(diff)만 반영하고, 변경된 필드 이름 집합을 반환합니다.
- 삭제는 물리 삭제 대신 비활성화(soft delete)합니다.
"""

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Set, Type, TypeVar

from sqlalchemy import func
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


def diff_changes(db_obj: Any, obj_in: BaseModel) -> Dict[str, Any]:
    """
    입력 스키마에서 실제로 값이 바뀌는 필드만 추려 {필드명: 새 값} 으로 반환합니다.

    - None 또는 공백 문자열은 '값 없음'으로 보고 건너뜁니다.
    - 현재 저장된 값과 같으면 건너뜁니다.
    """
    changes: Dict[str, Any] = {}
    for key, value in obj_in.model_dump(exclude_unset=True).items():
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        if getattr(db_obj, key) != value:
            changes[key] = value
    return changes


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    def __init__(self, model: Type[ModelType]):
        self.model = model

    @property
    def soft_deletable(self) -> bool:
        return hasattr(self.model, "is_active")

    def _apply_active_filter(self, query, active_only: bool):
        if active_only and self.soft_deletable:
            query = query.where(self.model.is_active == True)  # noqa: E712
        return query

    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다. 비활성 레코드도 조회됩니다.
        """
        return await db.get(self.model, id)

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any
    ) -> Optional[ModelType]:
        statement = select(self.model).where(getattr(self.model, attribute) == value)
        response = await db.execute(statement)
        return response.scalars().first()

    async def exists(self, db: AsyncSession, **filters: Any) -> bool:
        """
        주어진 속성 조건(모두 AND)을 만족하는 레코드가 하나라도 있는지 확인합니다.
        """
        statement = select(self.model.id)
        for attribute, value in filters.items():
            statement = statement.where(getattr(self.model, attribute) == value)
        response = await db.execute(statement.limit(1))
        return response.first() is not None

    async def count(self, db: AsyncSession, *, active_only: bool = True) -> int:
        query = self._apply_active_filter(select(func.count()).select_from(self.model), active_only)
        result = await db.execute(query)
        return result.scalar_one()

    async def get_page(
        self, db: AsyncSession, *, skip: int = 0, limit: int = 100, active_only: bool = True
    ) -> List[ModelType]:
        """
        id 내림차순으로 정렬한 뒤 skip 건을 건너뛰고 limit 건을 조회합니다.
        """
        query = self._apply_active_filter(select(self.model), active_only)
        query = query.order_by(self.model.id.desc()).offset(skip).limit(limit)
        result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        *,
        obj_in: CreateSchemaType,
        exclude: Optional[Set[str]] = None,
        **extra: Any,
    ) -> ModelType:
        """
        새로운 레코드를 생성합니다.
        exclude 는 저장하지 않을 입력 필드(예: 평문 password)이고,
        extra 는 입력 스키마에 없는 서버 측 값(예: password_hash, device_id)입니다.
        """
        data = obj_in.model_dump(exclude=exclude)
        data.update(extra)
        data["created_date"] = datetime.now()
        db_obj = self.model.model_validate(data)
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self, db: AsyncSession, *, db_obj: ModelType, obj_in: UpdateSchemaType
    ) -> Set[str]:
        """
        변경된 필드만 반영하고 updated_date 를 기록합니다.
        변경된 필드 이름 집합을 반환하며, 빈 집합이면 아무것도 저장하지 않습니다.
        """
        changes = diff_changes(db_obj, obj_in)
        if not changes:
            return set()

        for key, value in changes.items():
            setattr(db_obj, key, value)
        if hasattr(db_obj, "updated_date"):
            db_obj.updated_date = datetime.now()

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return set(changes)

    async def soft_delete(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """
        레코드를 비활성화합니다. updated_date 컬럼이 있는 모델은 같은 시각으로 기록합니다.
        """
        deactivated_at = db_obj.deactivate()
        if hasattr(db_obj, "updated_date"):
            db_obj.updated_date = deactivated_at

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj
