# app/domains/complexes/crud.py

"""
'complexes' 도메인의 CRUD 작업을 담당하는 모듈입니다.
"""

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.domains.complexes import models as complex_models
from app.domains.complexes import schemas as complex_schemas


class CRUDComplex(CRUDBase[complex_models.Complex, complex_schemas.ComplexCreate, complex_schemas.ComplexUpdate]):
    def __init__(self):
        super().__init__(complex_models.Complex)

    async def is_active_complex(self, db: AsyncSession, complex_id: int) -> bool:
        """관리위원회 구성원 등록 시 참조 대상 단지가 존재하고 활성 상태인지 확인합니다."""
        return await self.exists(db, id=complex_id, is_active=True)


# CRUD 인스턴스 생성
housing_complex = CRUDComplex()
