# smeease/models/employee.py
from sqlalchemy import Column, String, Float, DateTime, CheckConstraint
from smeease.database import Base


# Staff record; exactly one of salary / hourly_rate is set, chosen by pay_type
class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = (
        CheckConstraint(
            "(pay_type = 'salary' AND salary IS NOT NULL AND hourly_rate IS NULL) OR "
            "(pay_type = 'hourly' AND hourly_rate IS NOT NULL AND salary IS NULL)",
            name="ck_employee_pay",
        ),
    )

    employee_id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    role = Column(String, nullable=False)
    department = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=False)
    joined_date = Column(DateTime(timezone=True), nullable=False)
    status = Column(String, nullable=False, default="Active")

    pay_type = Column(String, nullable=False, default="salary")
    salary = Column(Float, CheckConstraint("salary >= 0"), nullable=True)
    hourly_rate = Column(Float, CheckConstraint("hourly_rate >= 0"), nullable=True)

    preferred_day_off = Column(String, nullable=False)
    default_shift = Column(String, nullable=False)
