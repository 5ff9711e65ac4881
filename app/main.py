# app/main.py

"""
FastAPI 애플리케이션 인스턴스를 생성하고 미들웨어, 예외 처리기, 도메인 라우터를 등록하는 모듈입니다.

실행 예: `uvicorn app.main:app --reload`
"""

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlmodel import select
from fastapi import FastAPI, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel.ext.asyncio.session import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

# 핵심 설정 및 데이터베이스 모듈 임포트
from app.core.config import settings
from app.core.database import create_db_and_tables, engine
from app.core import dependencies as deps
from app.core.exceptions import error_boundary, http_exception_handler, validation_exception_handler
from app.core.logging_config import configure_logging

# 각 도메인의 라우터들을 임포트합니다.
from app.domains.complexes.routers import router as complexes_router
from app.domains.merchants.routers import router as merchants_router
from app.domains.members.routers import router as members_router
from app.domains.news.routers import router as news_router
from app.domains.comments.routers import router as comments_router

logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 시작/종료 시 처리를 담당합니다.
    스키마 생성은 Alembic 마이그레이션으로 수행하며 (DB_AUTO_CREATE 는 개발용), 종료 시 연결 풀을 정리합니다.
    """
    logger.info("%s %s starting (env=%s)", settings.APP_NAME, settings.APP_VERSION, settings.APP_ENV)
    if settings.DB_AUTO_CREATE:
        await create_db_and_tables()
    yield  # 애플리케이션 실행
    await engine.dispose()
    logger.info("Database connection pool disposed")


def create_app() -> FastAPI:
    """
    애플리케이션 팩토리. 테스트에서도 같은 구성으로 인스턴스를 만듭니다.
    """
    configure_logging()

    application = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs",       # Swagger UI
        redoc_url="/redoc",     # ReDoc
        lifespan=lifespan,
    )

    # -- 오류 경계 --
    # 처리되지 않은 예외는 이 미들웨어에서 500 봉투로 변환됩니다.
    application.middleware("http")(error_boundary)

    # -- CORS 미들웨어 설정 --
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -- 예외 처리기 --
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)

    # -- 도메인 라우터 포함 --
    application.include_router(complexes_router, prefix="/complexes")
    application.include_router(merchants_router, prefix="/merchants")
    application.include_router(members_router, prefix="/members")
    application.include_router(news_router, prefix="/latestNews")
    application.include_router(comments_router, prefix="/comments")

    application.add_api_route("/", read_root, methods=["GET"], summary="API Root")
    application.add_api_route("/health-check", health_check, methods=["GET"], summary="Health Check")
    return application


# -- 루트 엔드포인트 --
async def read_root():
    """
    API 의 시작점을 알리고 문서 링크를 제공합니다.
    """
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
async def health_check(session: AsyncSession = Depends(deps.get_db_session)):
    """
    데이터베이스에 `SELECT 1` 을 실행하여 연결 상태를 확인합니다.
    연결 실패는 오류 경계 미들웨어에서 500 응답으로 변환됩니다.
    """
    result = await session.exec(select(1))
    result.first()
    return {"status": "ok", "database_connection": "successful"}


app = create_app()
