# app/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

- `config.py`: 애플리케이션 설정 및 환경 변수 관리 (Pydantic Settings).
- `logging_config.py`: 표준 logging 초기화.
- `database.py`: 비동기 엔진과 세션 관리 (SQLModel 및 AsyncSQLAlchemy).
- `database_base.py`: 생성/수정 일시, 소프트 삭제 생명주기 Mixin.
- `security.py`: 비밀번호 해싱, Device-Id 파싱.
- `schemas.py`: 공유 필드 타입(전화번호, 웹 주소 등)과 입력/출력 스키마 기반 클래스.
- `dependencies.py`: FastAPI 의존성 주입 함수.
- `crud_base.py`: 소프트 삭제와 페이지 조회를 지원하는 제네릭 CRUD.
- `pagination.py`: 페이지 범위 계산.
- `responses.py`: 공통 응답 봉투(envelope) 생성.
- `exceptions.py`: API 예외와 예외 핸들러.
- `resource.py`: 리소스별 Create/List/Update/Delete 라우터 팩토리.
"""

__title__ = "MTK Core"
__description__ = "Core components for the MTK FastAPI application."
__version__ = "0.1.0"
__all__ = []
