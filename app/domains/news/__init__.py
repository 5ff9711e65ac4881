# app/domains/news/__init__.py

"""
FastAPI 애플리케이션의 'news' 도메인 패키지입니다.

단지 포털의 최신 소식(LatestNews): 제목, 본문, 게시 일자(newsTime), 이미지 URL.
API 경로는 `/latestNews` 입니다.
"""

__title__ = "MTK News Domain"
__description__ = "Manages latest news items."
__version__ = "0.1.0"
__all__ = []
