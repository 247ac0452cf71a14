# smeease/schemas/supplier.py
from typing import Optional

from pydantic import Field

from smeease.schemas.base import ORMBase


class SupplierBase(ORMBase):
    name: str = Field(min_length=1)
    contact: str = Field(min_length=1)
    email: str = Field(min_length=1)


# Schema for creating a new supplier
class SupplierCreate(SupplierBase):
    pass


# Schema for supplier updates - all fields optional
class SupplierUpdate(ORMBase):
    name: Optional[str] = Field(None, min_length=1)
    contact: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, min_length=1)


class SupplierOut(SupplierBase):
    supplier_id: int
