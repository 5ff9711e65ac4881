# app/domains/merchants/routers.py

"""
'merchants' 도메인과 관련된 API 엔드포인트를 정의하는 모듈입니다.

- `POST /merchants/create`
- `GET /merchants/get?limit=3&page=1` (활성 상점만)
- `PUT /merchants/update/{id}`
- `DELETE /merchants/delete/{id}`
"""

from app.core.resource import ResourceRouter

from . import crud as merchant_crud
from . import schemas as merchant_schemas

merchants = ResourceRouter(
    crud=merchant_crud.merchant,
    read_schema=merchant_schemas.MerchantRead,
    create_schema=merchant_schemas.MerchantCreate,
    update_schema=merchant_schemas.MerchantUpdate,
    label="Merchant",
    default_limit=3,
    tags=["Merchants (입점 상점)"],
)

router = merchants.router
