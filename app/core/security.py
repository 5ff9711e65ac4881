# app/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 모듈입니다.

- 비밀번호 해싱 및 검증 (passlib, bcrypt).
- 단말기 식별자(Device-Id) 파싱.

평문 비밀번호는 해싱 후 즉시 버려지며 어디에도 저장되지 않습니다.
"""

import uuid
from typing import Optional

from passlib.context import CryptContext  # 비밀번호 해싱을 위한 라이브러리


# --- 비밀번호 해싱 설정 ---
# bcrypt 해싱 알고리즘을 사용합니다 (솔트는 해시 문자열에 포함됩니다).
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    일반 텍스트 비밀번호와 해싱된 비밀번호를 비교하여 일치하는지 확인합니다.
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """
    주어진 비밀번호를 해싱합니다.
    """
    return pwd_context.hash(password)


def parse_device_id(raw: Optional[str]) -> Optional[uuid.UUID]:
    """
    Device-Id 헤더 값을 UUID 로 변환합니다.
    값이 없거나 형식이 잘못되었거나 nil UUID(모두 0)이면 None 을 반환합니다.
    """
    if raw is None or not raw.strip():
        return None
    try:
        device_id = uuid.UUID(raw.strip())
    except ValueError:
        return None
    if device_id.int == 0:
        return None
    return device_id
