# smeease/models/tax_document.py
from sqlalchemy import Column, Integer, String, Float, Date
from smeease.database import Base


# Filing or payment the business has to track (VAT return, payroll tax, ...)
class TaxDocument(Base):
    __tablename__ = "tax_documents"

    document_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String, nullable=False)
    doc_type = Column(String, nullable=False)
    tax_year = Column(Integer, nullable=False, index=True)
    amount = Column(Float, nullable=False, default=0)
    due_date = Column(Date, nullable=True)
    status = Column(String, nullable=False, default="Pending")
