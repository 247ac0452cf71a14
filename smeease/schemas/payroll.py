# smeease/schemas/payroll.py
from datetime import date
from typing import Literal, Optional

from pydantic import Field, model_validator

from smeease.schemas.base import ORMBase

PeriodStatus = Literal["Open", "Closed"]


# ---- PAYROLL PERIODS ----
class PayrollPeriodBase(ORMBase):
    start_date: date
    end_date: date
    status: PeriodStatus = "Open"


class PayrollPeriodCreate(PayrollPeriodBase):
    @model_validator(mode="after")
    def check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class PayrollPeriodUpdate(ORMBase):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[PeriodStatus] = None


class PayrollPeriodOut(PayrollPeriodBase):
    period_id: int


# ---- PAYSLIPS ----
class PayslipBase(ORMBase):
    employee_id: str = Field(min_length=1)
    period_id: int
    gross_pay: float = Field(ge=0)
    deductions: float = Field(default=0, ge=0)
    net_pay: Optional[float] = None


class PayslipCreate(PayslipBase):
    """net_pay defaults to gross pay minus deductions."""

    @model_validator(mode="after")
    def fill_net_pay(self):
        if self.net_pay is None:
            self.net_pay = round(self.gross_pay - self.deductions, 2)
        return self


class PayslipUpdate(ORMBase):
    employee_id: Optional[str] = Field(None, min_length=1)
    period_id: Optional[int] = None
    gross_pay: Optional[float] = Field(None, ge=0)
    deductions: Optional[float] = Field(None, ge=0)
    net_pay: Optional[float] = None


class PayslipOut(PayslipBase):
    payslip_id: int
    net_pay: float
