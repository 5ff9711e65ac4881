# tests/__init__.py

"""
MTK API 테스트 스위트 패키지입니다.

- `core/`: 페이지 계산, 변경 필드 diff, 생명주기, Device-Id 파싱 등 단위 테스트.
- `domains/`: 리소스별(complexes, merchants, members, news, comments) API 통합 테스트.
- `conftest.py`: 테스트 DB, 세션, 클라이언트, 레코드 생성 팩토리 픽스처.

테스트 DB 는 `TEST_DATABASE_URL` 환경 변수로 지정하며, 기본값은 로컬 sqlite 파일입니다.
"""

__title__ = "MTK API Tests"
__description__ = "Test suite for the MTK FastAPI application."
__version__ = "0.1.0"
__all__ = []
