# app/domains/members/__init__.py

"""
FastAPI 애플리케이션의 'members' 도메인 패키지입니다.

단지 관리위원회 구성원(ManagementBoard)을 등록하고 조회합니다.
- 등록 시 참조 단지의 활성 여부, Device-Id 헤더, 사용자명 중복을 순서대로 확인합니다.
- 비밀번호는 bcrypt 해시로만 저장됩니다.
- 수정/삭제 API 는 없으며 활성 플래그도 없습니다.
"""

__title__ = "MTK Management Board Domain"
__description__ = "Registers and lists management board members."
__version__ = "0.1.0"
__all__ = []
