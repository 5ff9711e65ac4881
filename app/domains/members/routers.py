# app/domains/members/routers.py

"""
'members' 도메인과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- `POST /members/create` (헤더 `Device-Id: <uuid>` 필수)
- `GET /members/get?limit=8&page=1` (전체 구성원)
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Form, Header
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.exceptions import BadRequestException
from app.core.resource import ResourceRouter
from app.core.responses import success_envelope
from app.core.security import parse_device_id
from app.domains.complexes.crud import housing_complex

from . import crud as member_crud
from . import schemas as member_schemas

logger = logging.getLogger(__name__)

INVALID_COMPLEX_ID = "INVALID_COMPLEX_ID"
INVALID_DEVICE_ID = "INVALID_DEVICE_ID"
USERNAME_TAKEN = "USERNAME_TAKEN"

members = ResourceRouter(
    crud=member_crud.member,
    read_schema=member_schemas.ManagementBoardRead,
    label="Member",
    default_limit=8,
    operations=("list",),
    tags=["Members (관리위원회)"],
)

router = members.router


@router.post("/create", summary="관리위원회 구성원 등록")
async def create_member(
    payload: Annotated[member_schemas.ManagementBoardCreate, Form()],
    device_id: Optional[str] = Header(None, alias="Device-Id"),
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    새 구성원을 등록합니다.

    입력 검증 이후 다음 순서로 확인하며, 처음 실패한 항목의 코드로 400 을 반환합니다.
    1. 참조 단지가 존재하고 활성 상태인지 (`INVALID_COMPLEX_ID`)
    2. Device-Id 헤더가 nil 이 아닌 UUID 인지 (`INVALID_DEVICE_ID`)
    3. 사용자명이 사용 중이 아닌지 (`USERNAME_TAKEN`, 대소문자 구분)
    """
    if not await housing_complex.is_active_complex(db, payload.complexes_id):
        logger.warning("Member rejected: complex %s missing or inactive", payload.complexes_id)
        raise BadRequestException(INVALID_COMPLEX_ID, "The specified Complex does not exist.")

    parsed_device_id = parse_device_id(device_id)
    if parsed_device_id is None:
        logger.warning("Member rejected: invalid Device-Id header %r", device_id)
        raise BadRequestException(INVALID_DEVICE_ID, "Device ID is missing or invalid.")

    if await member_crud.member.username_taken(db, payload.username):
        logger.warning("Member rejected: username %r already taken", payload.username)
        raise BadRequestException(USERNAME_TAKEN, "Username is already taken.")

    db_obj = await member_crud.member.create_member(db, obj_in=payload, device_id=parsed_device_id)
    logger.info("Member created (id=%s, complex=%s)", db_obj.id, db_obj.complexes_id)
    return success_envelope(details=members.serialize(db_obj))
