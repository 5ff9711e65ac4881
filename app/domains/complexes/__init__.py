# app/domains/complexes/__init__.py

"""
FastAPI 애플리케이션의 'complexes' 도메인 패키지입니다.

주거 단지(Complex)의 기본 정보(이름, 주소, 연락처, 웹 주소, 준공 연도, 대표 이미지 URL)를
관리합니다. 단지는 삭제되지 않고 비활성화되며, 관리위원회 구성원이 단지를 참조합니다.

주요 서브모듈:
- `models.py`: complexes 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 요청(폼) 및 응답 스키마.
- `crud.py`: 비동기 CRUD 로직.
- `routers.py`: API 엔드포인트 정의.
"""

__title__ = "MTK Complex Domain"
__description__ = "Manages residential complexes."
__version__ = "0.1.0"
__all__ = []
