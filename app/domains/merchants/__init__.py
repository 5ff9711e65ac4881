# app/domains/merchants/__init__.py

"""
FastAPI 애플리케이션의 'merchants' 도메인 패키지입니다.

단지 내 입점 상점(Merchant)의 이름, 주소, 연락처, 웹 주소, 이미지 URL, 소개를 관리합니다.
구조는 'complexes' 와 같고 준공 일자(openYear)만 없습니다.
"""

__title__ = "MTK Merchant Domain"
__description__ = "Manages merchant listings."
__version__ = "0.1.0"
__all__ = []
