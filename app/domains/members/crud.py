# app/domains/members/crud.py

"""
'members' 도메인의 CRUD 작업을 담당하는 모듈입니다.
"""

import uuid

from pydantic import BaseModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.core.security import get_password_hash
from app.domains.members import models as member_models
from app.domains.members import schemas as member_schemas


class CRUDManagementBoard(CRUDBase[member_models.ManagementBoard, member_schemas.ManagementBoardCreate, BaseModel]):
    def __init__(self):
        super().__init__(member_models.ManagementBoard)

    async def username_taken(self, db: AsyncSession, username: str) -> bool:
        return await self.exists(db, username=username)

    async def create_member(
        self, db: AsyncSession, *, obj_in: member_schemas.ManagementBoardCreate, device_id: uuid.UUID
    ) -> member_models.ManagementBoard:
        """
        평문 비밀번호를 해싱하여 저장합니다. 평문은 모델로 전달되지 않습니다.
        """
        return await self.create(
            db,
            obj_in=obj_in,
            exclude={"password"},
            password_hash=get_password_hash(obj_in.password),
            device_id=device_id,
        )


# CRUD 인스턴스 생성
member = CRUDManagementBoard()
