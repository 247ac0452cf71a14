# smeease/schemas/employee.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, model_validator

from smeease.schemas.base import ORMBase

EmployeeStatus = Literal["Active", "On Leave", "Absent"]
PayType = Literal["salary", "hourly"]

EMPLOYEE_STATUSES = ("Active", "On Leave", "Absent")
PAY_TYPES = ("salary", "hourly")


# Fields shared by every employee representation
class EmployeeFields(ORMBase):
    name: str
    role: str
    department: str
    phone: str
    email: str
    joined_date: datetime
    status: EmployeeStatus = "Active"
    pay_type: PayType = "salary"
    salary: Optional[float] = Field(default=None, ge=0)
    hourly_rate: Optional[float] = Field(default=None, ge=0)
    preferred_day_off: str
    default_shift: str


class EmployeeWrite(EmployeeFields):
    """Incoming employee payload. Exactly one pay field may be set and it
    must be the one selected by ``pay_type``."""

    @model_validator(mode="after")
    def check_pay_fields(self):
        if self.pay_type == "salary":
            if self.salary is None or self.hourly_rate is not None:
                raise ValueError("Salaried employees need a salary and no hourly rate")
        else:
            if self.hourly_rate is None or self.salary is not None:
                raise ValueError("Hourly employees need an hourly rate and no salary")
        return self


# Schema for creating a new employee
class EmployeeCreate(EmployeeWrite):
    employee_id: str = Field(min_length=1)


# Schema for PUT requests; the identifier comes from the path
class EmployeeUpdate(EmployeeWrite):
    employee_id: Optional[str] = None


# Employee as returned by the API. Rows are shown as stored, so display
# fields may be missing
class EmployeeOut(ORMBase):
    employee_id: str
    name: Optional[str] = None
    role: Optional[str] = None
    department: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    joined_date: Optional[datetime] = None
    status: Optional[str] = None
    pay_type: Optional[str] = None
    salary: Optional[float] = None
    hourly_rate: Optional[float] = None
    preferred_day_off: Optional[str] = None
    default_shift: Optional[str] = None
