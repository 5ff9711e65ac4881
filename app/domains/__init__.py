# app/domains/__init__.py

"""
리소스별 도메인 패키지 모음입니다.

- `complexes`: 주거 단지 (Complex)
- `merchants`: 입점 상점 (Merchant)
- `members`: 관리위원회 구성원 (ManagementBoard)
- `news`: 최신 소식 (LatestNews)
- `comments`: 방문자 의견 (Comment)
"""
