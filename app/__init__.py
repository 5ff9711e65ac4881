# app/__init__.py

"""
MTK FastAPI 애플리케이션의 메인 패키지입니다.

주거 단지(Complex) 포털의 백엔드로, 단지 정보, 입점 상점(Merchant),
관리위원회 구성원(Member), 최신 소식(LatestNews), 방문자 의견(Comment)을
관리하는 REST API를 제공합니다.

- `core`: 설정, 데이터베이스, 보안, 공통 CRUD/라우터 팩토리, 오류 처리.
- `domains`: 리소스별 모델, 스키마, CRUD, 라우터.
"""

APP_NAME = "MTK API"
APP_VERSION = "0.1.0"

__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Residential complex portal API backend."
__license__ = "MIT"
__all__ = []
