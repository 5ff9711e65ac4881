# tests/domains/__init__.py

"""
리소스(도메인)별 API 통합 테스트 패키지입니다.

- `test_complexes.py`: 단지 등록/목록/수정/비활성화, 공통 페이지/검증 규칙.
- `test_merchants.py`: 입점 상점.
- `test_members.py`: 관리위원회 구성원 등록 규칙(단지, Device-Id, 사용자명).
- `test_news.py`: 최신 소식.
- `test_comments.py`: 방문자 의견(수정 API 없음).
"""

__title__ = "MTK Domain Tests"
__description__ = "Per-resource API tests for the MTK FastAPI application."
__version__ = "0.1.0"
__all__ = []
