# app/domains/comments/__init__.py

"""
FastAPI 애플리케이션의 'comments' 도메인 패키지입니다.

방문자가 남기는 의견(Comment). 등록, 목록 조회, 비활성화만 지원하며 수정 API 는 없습니다.
수정 일시(updated_date) 컬럼이 없으므로 비활성화 시각은 deactivated_date 에만 기록됩니다.
"""

__title__ = "MTK Comment Domain"
__description__ = "Manages visitor comments."
__version__ = "0.1.0"
__all__ = []
