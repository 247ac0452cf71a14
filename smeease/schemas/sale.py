# smeease/schemas/sale.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from smeease.schemas.base import ORMBase


class SaleBase(ORMBase):
    upc: str = Field(min_length=1)
    quantity: int = Field(gt=0)
    total: float = Field(ge=0)
    sale_date: Optional[datetime] = None
    employee_id: Optional[str] = None


class SaleCreate(SaleBase):
    pass


class SaleUpdate(ORMBase):
    upc: Optional[str] = Field(None, min_length=1)
    quantity: Optional[int] = Field(None, gt=0)
    total: Optional[float] = Field(None, ge=0)
    sale_date: Optional[datetime] = None
    employee_id: Optional[str] = None


class SaleOut(SaleBase):
    sale_id: int
