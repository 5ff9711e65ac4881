# tests/conftest.py

import os
import uuid
from datetime import date, datetime
from typing import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app
from app.core import dependencies as deps
from app.core.security import get_password_hash

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하도록 한 번씩 임포트합니다.
from app.domains.complexes import models as complex_models
from app.domains.merchants import models as merchant_models
from app.domains.members import models as member_models
from app.domains.news import models as news_models
from app.domains.comments import models as comment_models


# --- 테스트용 데이터베이스 설정 ---
# 실제 운영 DB와 분리된 테스트 전용 DB URL을 사용합니다.
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///./test_mtk.db")
test_engine = create_async_engine(
    TEST_DATABASE_URL,
    echo=False,             # 테스트 시 SQL 쿼리 출력하지 않음
    future=True,
    poolclass=NullPool,     # 각 연결이 독립적으로 사용되고 바로 닫히도록 함
)

# 테스트용 세션 팩토리 생성 (AsyncSession)
TestingSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

VALID_PHONE = "+994501234567"


# --- 데이터베이스 픽스처 ---
@pytest_asyncio.fixture(scope="session", autouse=True)
async def setup_database():
    """
    테스트 세션 시작 시 모든 테이블을 삭제하고 재생성합니다.
    테스트 종료 시 다시 테이블을 삭제합니다.
    """
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield  # 테스트 실행

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await test_engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    각 테스트 함수마다 트랜잭션을 시작하고, 테스트 완료 후 롤백하여
    테스트 간의 격리를 보장하는 비동기 데이터베이스 세션을 제공합니다.
    세션의 commit() 은 바깥 트랜잭션을 커밋하지 않습니다.
    """
    connection = await test_engine.connect()
    transaction = await connection.begin()
    session = TestingSessionLocal(bind=connection)

    try:
        yield session
    finally:
        await session.close()
        await transaction.rollback()
        await connection.close()


# --- 클라이언트 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    요청마다 테스트 세션을 사용하도록 의존성을 오버라이드한 AsyncClient 를 반환합니다.
    """
    async def override_get_session():
        yield db_session

    original_overrides = main_app.dependency_overrides.copy()
    main_app.dependency_overrides.update({
        deps.get_db_session: override_get_session,
    })
    try:
        transport = ASGITransport(app=main_app)
        async with AsyncClient(transport=transport, base_url="http://test") as test_client:
            yield test_client
    finally:
        # 테스트가 끝난 후 원래 의존성 상태로 되돌립니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


@pytest.fixture(scope="function")
def override_dependency():
    """
    개별 테스트에서 추가 의존성(설정 등)을 바꿀 때 사용합니다.
    client 픽스처가 종료되면서 함께 정리됩니다.
    """
    def _override(dependency: Callable, replacement: Callable) -> None:
        main_app.dependency_overrides[dependency] = replacement
    return _override


# --- 레코드 생성 팩토리 픽스처 ---
# API 를 거치지 않고 DB 에 직접 행을 만들어 목록/수정/삭제 테스트의 사전 데이터로 사용합니다.
@pytest.fixture(scope="function")
def complex_factory(db_session: AsyncSession) -> Callable[..., Awaitable[complex_models.Complex]]:
    async def _create_complex(**kwargs) -> complex_models.Complex:
        data = {
            "title": "Sea Breeze",
            "address": "Nardaran, Baku",
            "phone_number": VALID_PHONE,
            "open_year": date(2015, 6, 1),
            "created_date": datetime(2024, 1, 1, 9, 30, 0),
            **kwargs,
        }
        housing_complex = complex_models.Complex(**data)
        db_session.add(housing_complex)
        await db_session.commit()
        await db_session.refresh(housing_complex)
        return housing_complex
    return _create_complex


@pytest.fixture(scope="function")
def merchant_factory(db_session: AsyncSession) -> Callable[..., Awaitable[merchant_models.Merchant]]:
    async def _create_merchant(**kwargs) -> merchant_models.Merchant:
        data = {"title": "Corner Bakery", "phone_number": VALID_PHONE, **kwargs}
        merchant = merchant_models.Merchant(**data)
        db_session.add(merchant)
        await db_session.commit()
        await db_session.refresh(merchant)
        return merchant
    return _create_merchant


@pytest.fixture(scope="function")
def news_factory(db_session: AsyncSession) -> Callable[..., Awaitable[news_models.LatestNews]]:
    async def _create_news(**kwargs) -> news_models.LatestNews:
        data = {"title": "Pool opening", "news_time": date(2024, 5, 20), **kwargs}
        news = news_models.LatestNews(**data)
        db_session.add(news)
        await db_session.commit()
        await db_session.refresh(news)
        return news
    return _create_news


@pytest.fixture(scope="function")
def comment_factory(db_session: AsyncSession) -> Callable[..., Awaitable[comment_models.Comment]]:
    async def _create_comment(**kwargs) -> comment_models.Comment:
        data = {"name": "Aysel", "phone_number": VALID_PHONE, "description": "Great service", **kwargs}
        comment = comment_models.Comment(**data)
        db_session.add(comment)
        await db_session.commit()
        await db_session.refresh(comment)
        return comment
    return _create_comment


@pytest.fixture(scope="function")
def member_factory(db_session: AsyncSession) -> Callable[..., Awaitable[member_models.ManagementBoard]]:
    async def _create_member(complexes_id: int, username: str, password: str = "boardpass1", **kwargs) -> member_models.ManagementBoard:
        data = {
            "complexes_id": complexes_id,
            "username": username,
            "password_hash": get_password_hash(password),
            "phone_number": VALID_PHONE,
            "device_id": uuid.uuid4(),
            **kwargs,
        }
        member = member_models.ManagementBoard(**data)
        db_session.add(member)
        await db_session.commit()
        await db_session.refresh(member)
        return member
    return _create_member


@pytest_asyncio.fixture(scope="function")
async def test_complex(complex_factory: Callable) -> complex_models.Complex:
    """활성 상태의 기본 단지."""
    return await complex_factory()


@pytest_asyncio.fixture(scope="function")
async def inactive_complex(complex_factory: Callable, db_session: AsyncSession) -> complex_models.Complex:
    """비활성화된 단지. 구성원 등록 시 참조할 수 없습니다."""
    housing_complex = await complex_factory(title="Old Tower")
    housing_complex.deactivate()
    db_session.add(housing_complex)
    await db_session.commit()
    return housing_complex
