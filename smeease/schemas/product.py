# smeease/schemas/product.py
from typing import Optional

from pydantic import Field

from smeease.schemas.base import ORMBase
from smeease.schemas.supplier import SupplierOut


# Shared base attributes for product entities
class ProductBase(ORMBase):
    name: str = Field(min_length=1)
    stock: int = Field(ge=0)
    sold: int = Field(ge=0)
    min_stock: int


# Schema for creating a new product; the UPC is chosen by the client
class ProductCreate(ProductBase):
    upc: str = Field(min_length=1)
    supplier_id: int


# Schema for product updates - all fields optional, UPC is immutable
class ProductUpdate(ORMBase):
    name: Optional[str] = Field(None, min_length=1)
    stock: Optional[int] = Field(None, ge=0)
    sold: Optional[int] = Field(None, ge=0)
    min_stock: Optional[int] = None
    supplier_id: Optional[int] = None


# Product as returned by the API, with its supplier joined in
class ProductOut(ProductBase):
    upc: str
    supplier_id: int
    supplier: Optional[SupplierOut] = None
