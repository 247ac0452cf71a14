# smeease/models/supplier.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from smeease.database import Base


# Supplier contact card; products point at it through supplier_id
class Supplier(Base):
    __tablename__ = "suppliers"

    supplier_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    contact = Column(String, nullable=False)
    email = Column(String, nullable=False)

    products = relationship("Product", back_populates="supplier")
