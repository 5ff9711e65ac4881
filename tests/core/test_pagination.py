# tests/core/test_pagination.py

"""
목록 조회 페이지 범위 계산(`app.core.pagination.paginate`)에 대한 단위 테스트입니다.
"""

import pytest

from app.core.exceptions import BadRequestException
from app.core.pagination import INVALID_PAGE, paginate


def _message(exc: BadRequestException) -> dict:
    return exc.detail["messages"][0]


@pytest.mark.parametrize(
    "total, limit, expected_pages",
    [(1, 8, 1), (8, 8, 1), (9, 8, 2), (10, 3, 4), (24, 3, 8)],
)
def test_total_pages_is_ceiling(total, limit, expected_pages):
    page = paginate(total, limit, 1)
    assert page.total_pages == expected_pages
    assert page.total_count == total


def test_offset_skips_previous_pages():
    page = paginate(10, 3, 3)
    assert page.offset == 6
    assert page.as_dict() == {"currentPage": 3, "totalPages": 4, "totalCount": 10}


@pytest.mark.parametrize("page_number", [0, -1])
def test_page_below_one_is_rejected(page_number):
    with pytest.raises(BadRequestException) as exc_info:
        paginate(10, 3, page_number)

    message = _message(exc_info.value)
    assert exc_info.value.status_code == 400
    assert message["code"] == INVALID_PAGE
    assert message["message"] == "Page number cannot be less than 1."


def test_page_beyond_last_reports_maximum():
    with pytest.raises(BadRequestException) as exc_info:
        paginate(10, 3, 5)

    assert _message(exc_info.value)["message"] == (
        "Page number exceeds the maximum number of pages. Maximum is 4."
    )


def test_empty_collection_rejects_first_page_by_default():
    with pytest.raises(BadRequestException) as exc_info:
        paginate(0, 8, 1)

    assert _message(exc_info.value)["message"].endswith("Maximum is 0.")


def test_empty_first_page_allowed_when_enabled():
    page = paginate(0, 8, 1, allow_empty_first_page=True)
    assert page.as_dict() == {"currentPage": 1, "totalPages": 0, "totalCount": 0}

    # 빈 컬렉션이라도 2페이지 이상은 여전히 거부됩니다.
    with pytest.raises(BadRequestException):
        paginate(0, 8, 2, allow_empty_first_page=True)
