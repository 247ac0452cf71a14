# smeease/models/payroll.py
from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey
from sqlalchemy.orm import relationship
from smeease.database import Base


# A pay run window; payslips are issued against it
class PayrollPeriod(Base):
    __tablename__ = "payroll_periods"

    period_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(String, nullable=False, default="Open")

    payslips = relationship("Payslip", back_populates="period")


class Payslip(Base):
    __tablename__ = "payslips"

    payslip_id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    employee_id = Column(String, ForeignKey("employees.employee_id"), nullable=False, index=True)
    period_id = Column(Integer, ForeignKey("payroll_periods.period_id"), nullable=False, index=True)

    gross_pay = Column(Float, nullable=False)
    deductions = Column(Float, nullable=False, default=0)
    net_pay = Column(Float, nullable=False)

    period = relationship("PayrollPeriod", back_populates="payslips")
