# app/core/pagination.py

"""
목록 조회 API 의 페이지 범위 계산 모듈입니다.

- page 는 1부터 시작합니다.
- 최대 페이지 수는 ceil(total / limit) 이며, 이를 넘는 page 는 INVALID_PAGE 로 거부합니다.
- 전체 건수가 0 이면 최대 페이지도 0 이므로 어떤 page 도 허용되지 않습니다.
  (ALLOW_EMPTY_FIRST_PAGE 설정 시 빈 1페이지를 허용합니다.)
"""

import math
from dataclasses import dataclass
from typing import Dict

from app.core.exceptions import BadRequestException

INVALID_PAGE = "INVALID_PAGE"


@dataclass(frozen=True)
class Page:
    current_page: int
    total_pages: int
    total_count: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.limit

    def as_dict(self) -> Dict[str, int]:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalCount": self.total_count,
        }


def paginate(total: int, limit: int, page: int, allow_empty_first_page: bool = False) -> Page:
    """
    요청된 page 가 유효한지 검사하고 Page 를 반환합니다.
    유효하지 않으면 BadRequestException(INVALID_PAGE)을 발생시킵니다.
    """
    if page < 1:
        raise BadRequestException(INVALID_PAGE, "Page number cannot be less than 1.")

    max_pages = math.ceil(total / limit)
    empty_first_page = allow_empty_first_page and total == 0 and page == 1
    if page > max_pages and not empty_first_page:
        raise BadRequestException(
            INVALID_PAGE,
            f"Page number exceeds the maximum number of pages. Maximum is {max_pages}.",
        )
    return Page(current_page=page, total_pages=max_pages, total_count=total, limit=limit)
