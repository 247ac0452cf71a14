# smeease/schemas/tax_document.py
from datetime import date
from typing import Literal, Optional

from pydantic import Field

from smeease.schemas.base import ORMBase

TaxDocumentStatus = Literal["Pending", "Filed", "Paid"]


class TaxDocumentBase(ORMBase):
    title: str = Field(min_length=1)
    doc_type: str = Field(min_length=1)
    tax_year: int = Field(ge=1900)
    amount: float = Field(default=0, ge=0)
    due_date: Optional[date] = None
    status: TaxDocumentStatus = "Pending"


class TaxDocumentCreate(TaxDocumentBase):
    pass


class TaxDocumentUpdate(ORMBase):
    title: Optional[str] = Field(None, min_length=1)
    doc_type: Optional[str] = Field(None, min_length=1)
    tax_year: Optional[int] = Field(None, ge=1900)
    amount: Optional[float] = Field(None, ge=0)
    due_date: Optional[date] = None
    status: Optional[TaxDocumentStatus] = None


class TaxDocumentOut(TaxDocumentBase):
    document_id: int
