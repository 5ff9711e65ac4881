# app/domains/comments/routers.py

"""
'comments' 도메인과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- `POST /comments/create`
- `GET /comments/get?limit=3&page=1` (활성 의견만)
- `DELETE /comments/delete/{id}`
"""

from app.core.resource import ResourceRouter

from . import crud as comment_crud
from . import schemas as comment_schemas

comments = ResourceRouter(
    crud=comment_crud.comment,
    read_schema=comment_schemas.CommentRead,
    create_schema=comment_schemas.CommentCreate,
    label="Comment",
    default_limit=3,
    operations=("create", "list", "delete"),
    tags=["Comments (방문자 의견)"],
)

router = comments.router
