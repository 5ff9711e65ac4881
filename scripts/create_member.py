# scripts/create_member.py

"""
관리위원회 구성원을 명령줄에서 등록하는 운영자용 스크립트입니다.
`POST /members/create` 와 같은 확인(활성 단지, 사용자명 중복)을 거쳐 해시된 비밀번호로 저장합니다.

사용 예:
    python -m scripts.create_member --complex-id 1 --username board.admin --phone +994501234567
"""

import asyncio
import uuid
from typing import Optional

import typer
from pydantic import ValidationError

from app.core.database import get_async_session_context
from app.core.security import parse_device_id
from app.domains.complexes.crud import housing_complex
from app.domains.members import crud as member_crud
from app.domains.members import schemas as member_schemas

cli = typer.Typer()


async def create_board_member(
    member_in: member_schemas.ManagementBoardCreate,
    device_id: uuid.UUID,
) -> bool:
    """
    구성원을 생성하는 비동기 함수. 확인에 실패하면 메시지를 출력하고 False 를 반환합니다.
    """
    async with get_async_session_context() as db:
        if not await housing_complex.is_active_complex(db, member_in.complexes_id):
            print(f"오류: 존재하지 않거나 비활성화된 단지입니다: {member_in.complexes_id}")
            return False

        if await member_crud.member.username_taken(db, member_in.username):
            print(f"오류: 이미 존재하는 사용자명입니다: {member_in.username}")
            return False

        member = await member_crud.member.create_member(db, obj_in=member_in, device_id=device_id)
        print(f"구성원이 성공적으로 등록되었습니다: {member.username} (id={member.id}, deviceId={member.device_id})")
        return True


@cli.command()
def main(
    complex_id: int = typer.Option(
        ..., '--complex-id', '-c',
        prompt="소속 단지 ID를 입력하세요",
        help="구성원이 속한 활성 단지의 ID입니다."
    ),
    username: str = typer.Option(
        ..., '--username', '-u',
        prompt="사용자명을 입력하세요",
        help="대소문자를 구분하는 고유 사용자명입니다. (3~100자)"
    ),
    phone_number: str = typer.Option(
        ..., '--phone', '-t',
        prompt="전화번호(+994...)를 입력하세요",
        help="+994 형식의 전화번호입니다."
    ),
    password: str = typer.Option(
        ..., '--password', '-p',
        prompt="비밀번호를 입력하세요",
        hide_input=True,
        confirmation_prompt=True,
        help="구성원 비밀번호입니다. (8~20자)"
    ),
    name: Optional[str] = typer.Option(None, '--name', '-n', help="이름"),
    surname: Optional[str] = typer.Option(None, '--surname', '-s', help="성"),
    email: Optional[str] = typer.Option(None, '--email', '-e', help="이메일 주소"),
    is_man: bool = typer.Option(False, '--is-man', help="남성 여부"),
    device_id: Optional[str] = typer.Option(
        None, '--device-id', '-d',
        help="등록 단말기 UUID. 생략하면 새로 생성합니다."
    ),
):
    """
    MTK 애플리케이션에 새 관리위원회 구성원을 등록합니다.
    """
    try:
        member_in = member_schemas.ManagementBoardCreate(
            complexes_id=complex_id,
            username=username,
            phone_number=phone_number,
            password=password,
            name=name,
            surname=surname,
            email=email,
            is_man=is_man,
        )
    except ValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"오류: {field}: {error['msg']}")
        raise typer.Abort()

    if device_id is None:
        parsed_device_id = uuid.uuid4()
    else:
        parsed_device_id = parse_device_id(device_id)
        if parsed_device_id is None:
            print(f"오류: 올바른 단말기 UUID가 아닙니다: {device_id}")
            raise typer.Abort()

    print("구성원 등록을 시작합니다...")
    if not asyncio.run(create_board_member(member_in, parsed_device_id)):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    cli()
