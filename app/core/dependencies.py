# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 현재 애플리케이션 설정 (get_settings).
"""

from typing import AsyncGenerator
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import Settings, settings
from app.core.database import AsyncSessionLocal


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 열고, 요청 처리 중 예외가 전달되면 롤백한 뒤 다시 발생시킵니다.
    세션은 요청이 끝나면 항상 닫힙니다.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


def get_settings() -> Settings:
    """
    애플리케이션 설정 객체를 반환합니다.
    테스트에서 dependency_overrides 로 설정값을 바꿀 수 있도록 의존성으로 노출합니다.
    """
    return settings
