# app/domains/comments/crud.py

"""
'comments' 도메인의 CRUD 작업을 담당하는 모듈입니다.
"""

from pydantic import BaseModel

from app.core.crud_base import CRUDBase
from app.domains.comments import models as comment_models
from app.domains.comments import schemas as comment_schemas


class CRUDComment(CRUDBase[comment_models.Comment, comment_schemas.CommentCreate, BaseModel]):
    def __init__(self):
        super().__init__(comment_models.Comment)


# CRUD 인스턴스 생성
comment = CRUDComment()
