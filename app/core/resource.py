# app/core/resource.py

"""
리소스별 Create / List / Update / Delete 엔드포인트를 생성하는 라우터 팩토리 모듈입니다.

각 도메인은 CRUD 객체, 입력/출력 스키마, 기본 페이지 크기, 메시지용 이름만 지정하여
`ResourceRouter` 를 만들고, 필요한 작업만 노출합니다.

요청 흐름: 검증 → (수정/삭제 시) 존재 확인 → 필드 diff/병합 → 저장 → 응답 봉투 생성
"""

import logging
from typing import Annotated, Any, Iterable, Optional, Type

from fastapi import APIRouter, Depends, Form, Query
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.config import Settings
from app.core.crud_base import CRUDBase
from app.core.exceptions import BadRequestException, ResourceNotFoundException
from app.core.pagination import paginate
from app.core.responses import success_envelope
from app.core.schemas import FormSchema, ReadSchema

logger = logging.getLogger(__name__)

ALL_OPERATIONS = ("create", "list", "update", "delete")
NO_UPDATE = "NO_UPDATE"
# 페이지 크기 상한 (32비트 정수)
MAX_PAGE_SIZE = 2**31 - 1


class ResourceRouter:
    """
    하나의 리소스에 대한 APIRouter 를 구성합니다.

    - **create**: `POST /create` (폼 입력) → 200, 저장된 레코드 반환
    - **list**: `GET /get?limit&page` → 200, id 내림차순 페이지와 pagination 블록
    - **update**: `PUT /update/{id}` (폼 입력, 부분 수정) → 200 / 400 NO_UPDATE / 404
    - **delete**: `DELETE /delete/{id}` (소프트 삭제) → 200 / 404
    """

    def __init__(
        self,
        *,
        crud: CRUDBase,
        read_schema: Type[ReadSchema],
        label: str,
        default_limit: int,
        create_schema: Optional[Type[FormSchema]] = None,
        update_schema: Optional[Type[FormSchema]] = None,
        operations: Iterable[str] = ALL_OPERATIONS,
        tags: Optional[list] = None,
    ):
        self.crud = crud
        self.read_schema = read_schema
        self.create_schema = create_schema
        self.update_schema = update_schema
        self.label = label
        self.default_limit = default_limit
        self.operations = tuple(operations)
        self.router = APIRouter(tags=tags or [label])

        if "create" in self.operations:
            self._add_create_route()
        if "list" in self.operations:
            self._add_list_route()
        if "update" in self.operations:
            self._add_update_route()
        if "delete" in self.operations:
            self._add_delete_route()

    # -------------------------------------------------------------------------
    # 공통 헬퍼
    # -------------------------------------------------------------------------
    def serialize(self, db_obj: Any) -> dict:
        return self.read_schema.serialize(db_obj)

    async def get_or_404(self, db: AsyncSession, item_id: int) -> Any:
        db_obj = await self.crud.get(db, id=item_id)
        if db_obj is None:
            raise ResourceNotFoundException(item_id)
        return db_obj

    # -------------------------------------------------------------------------
    # 엔드포인트 등록
    # -------------------------------------------------------------------------
    def _add_create_route(self) -> None:
        create_schema = self.create_schema

        @self.router.post("/create", summary=f"새 {self.label} 생성")
        async def create_item(
            payload: Annotated[create_schema, Form()],
            db: AsyncSession = Depends(deps.get_db_session),
        ):
            db_obj = await self.crud.create(db, obj_in=payload)
            logger.info("%s created (id=%s)", self.label, db_obj.id)
            return success_envelope(details=self.serialize(db_obj))

    def _add_list_route(self) -> None:
        @self.router.get("/get", summary=f"{self.label} 목록 조회 (페이지)")
        async def list_items(
            limit: int = Query(self.default_limit, ge=1, le=MAX_PAGE_SIZE, description="페이지 크기"),
            page: int = Query(1, description="1부터 시작하는 페이지 번호"),
            db: AsyncSession = Depends(deps.get_db_session),
            app_settings: Settings = Depends(deps.get_settings),
        ):
            return await self.list_page(db, limit=limit, page=page, app_settings=app_settings)

    async def list_page(self, db: AsyncSession, *, limit: int, page: int, app_settings: Settings) -> dict:
        total = await self.crud.count(db)
        current = paginate(total, limit, page, allow_empty_first_page=app_settings.ALLOW_EMPTY_FIRST_PAGE)
        items = await self.crud.get_page(db, skip=current.offset, limit=limit)
        return success_envelope(
            details=[self.serialize(item) for item in items],
            pagination=current.as_dict(),
        )

    def _add_update_route(self) -> None:
        update_schema = self.update_schema

        @self.router.put("/update/{item_id}", summary=f"{self.label} 부분 수정")
        async def update_item(
            item_id: int,
            payload: Annotated[update_schema, Form()],
            db: AsyncSession = Depends(deps.get_db_session),
        ):
            db_obj = await self.get_or_404(db, item_id)
            changed = await self.crud.update(db, db_obj=db_obj, obj_in=payload)
            if not changed:
                raise BadRequestException(NO_UPDATE, "No changes detected, at least one field must be updated")
            logger.info("%s updated (id=%s, fields=%s)", self.label, item_id, sorted(changed))
            return success_envelope(details=self.serialize(db_obj), message="Successfully updated")

    def _add_delete_route(self) -> None:
        @self.router.delete("/delete/{item_id}", summary=f"{self.label} 비활성화 (소프트 삭제)")
        async def delete_item(
            item_id: int,
            db: AsyncSession = Depends(deps.get_db_session),
        ):
            db_obj = await self.get_or_404(db, item_id)
            await self.crud.soft_delete(db, db_obj=db_obj)
            logger.info("%s deactivated (id=%s)", self.label, item_id)
            return success_envelope(message=f"{self.label} successfully deactivated")
