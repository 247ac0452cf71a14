# smeease/models/product.py
from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from smeease.database import Base


# Product keyed by its UPC. The supplier is loaded eagerly because every
# product response embeds the supplier record.
class Product(Base):
    __tablename__ = "products"

    upc = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)

    stock = Column(Integer, CheckConstraint("stock >= 0"), nullable=False, default=0)
    sold = Column(Integer, CheckConstraint("sold >= 0"), nullable=False, default=0)
    min_stock = Column(Integer, nullable=False, default=0)

    supplier_id = Column(Integer, ForeignKey("suppliers.supplier_id"), nullable=False)
    supplier = relationship("Supplier", back_populates="products", lazy="joined")
