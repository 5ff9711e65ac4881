# app/domains/merchants/crud.py

"""
'merchants' 도메인의 CRUD 작업을 담당하는 모듈입니다.
"""

from app.core.crud_base import CRUDBase
from app.domains.merchants import models as merchant_models
from app.domains.merchants import schemas as merchant_schemas


class CRUDMerchant(CRUDBase[merchant_models.Merchant, merchant_schemas.MerchantCreate, merchant_schemas.MerchantUpdate]):
    def __init__(self):
        super().__init__(merchant_models.Merchant)


# CRUD 인스턴스 생성
merchant = CRUDMerchant()
