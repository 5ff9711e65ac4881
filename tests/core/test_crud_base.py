# tests/core/test_crud_base.py

"""
변경 필드 계산(`diff_changes`)과 소프트 삭제 생명주기(`SoftDeleteBase`)에 대한 단위 테스트입니다.
"""

from datetime import date, datetime

import pytest
from sqlalchemy import DateTime

from app.core.crud_base import diff_changes
from app.core.database_base import Active, Deactivated
from app.domains.complexes.models import Complex
from app.domains.complexes.schemas import ComplexUpdate
from app.domains.comments.models import Comment
from app.domains.members.models import ManagementBoard
from app.domains.merchants.models import Merchant
from app.domains.news.models import LatestNews


def _stored_complex() -> Complex:
    return Complex(
        id=1,
        title="Sea Breeze",
        phone_number="+994501234567",
        open_year=date(2015, 6, 1),
        created_date=datetime(2024, 1, 1, 9, 0, 0),
    )


def test_diff_ignores_missing_blank_and_equal_values():
    stored = _stored_complex()
    update = ComplexUpdate(title="Sea Breeze", address="", phone_number=None)

    assert diff_changes(stored, update) == {}


def test_diff_reports_only_changed_fields():
    stored = _stored_complex()
    update = ComplexUpdate(title="Sea Breeze", address="Bilgah", open_year=date(2016, 1, 1))

    assert diff_changes(stored, update) == {"address": "Bilgah", "open_year": date(2016, 1, 1)}


def test_new_record_is_active():
    assert _stored_complex().lifecycle == Active()


def test_deactivate_records_time_once():
    stored = _stored_complex()
    first = datetime(2024, 2, 1, 10, 0, 0)

    assert stored.deactivate(first) == first
    assert stored.is_active is False
    assert stored.lifecycle == Deactivated(at=first)

    # 두 번째 비활성화는 최초 비활성화 시각을 바꾸지 않습니다.
    assert stored.deactivate(datetime(2024, 3, 1, 10, 0, 0)) == first
    assert stored.lifecycle == Deactivated(at=first)


def test_comment_lifecycle_without_updated_date():
    comment = Comment(phone_number="+994551234567")
    assert comment.lifecycle == Active()

    at = comment.deactivate()
    assert comment.deactivated_date == at
    assert not hasattr(comment, "updated_date")


@pytest.mark.parametrize(
    "model, column",
    [
        (Complex, "created_date"),
        (Complex, "updated_date"),
        (Complex, "deactivated_date"),
        (Merchant, "updated_date"),
        (LatestNews, "deactivated_date"),
        (ManagementBoard, "created_date"),
        (Comment, "created_date"),
        (Comment, "deactivated_date"),
    ],
)
def test_timestamp_columns_are_naive_datetime(model, column: str):
    # datetime.now() 로 기록하는 값이 그대로 저장되도록 시간대 없는 DateTime 컬럼이어야 합니다.
    column_type = model.__table__.c[column].type
    assert type(column_type) is DateTime
    assert column_type.timezone is False
