# app/domains/complexes/routers.py

"""
'complexes' 도메인과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- `POST /complexes/create`
- `GET /complexes/get?limit=8&page=1` (활성 단지만)
- `PUT /complexes/update/{id}`
- `DELETE /complexes/delete/{id}`
"""

from app.core.resource import ResourceRouter

from . import crud as complex_crud
from . import schemas as complex_schemas

complexes = ResourceRouter(
    crud=complex_crud.housing_complex,
    read_schema=complex_schemas.ComplexRead,
    create_schema=complex_schemas.ComplexCreate,
    update_schema=complex_schemas.ComplexUpdate,
    label="Complex",
    default_limit=8,
    tags=["Complexes (주거 단지)"],
)

router = complexes.router
