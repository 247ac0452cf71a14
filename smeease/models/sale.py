# smeease/models/sale.py
from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, CheckConstraint, func
from smeease.database import Base


class Sale(Base):
    __tablename__ = "sales"

    sale_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    upc = Column(String, ForeignKey("products.upc"), nullable=False, index=True)
    quantity = Column(Integer, CheckConstraint("quantity > 0"), nullable=False)
    total = Column(Float, CheckConstraint("total >= 0"), nullable=False)
    sale_date = Column(DateTime(timezone=True), server_default=func.now())
    # Cashier, if recorded
    employee_id = Column(String, ForeignKey("employees.employee_id"), nullable=True)
