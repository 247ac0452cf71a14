# smeease/screens/employees.py
import random
from dataclasses import dataclass
from datetime import date
from typing import Optional

from smeease.schemas.employee import EMPLOYEE_STATUSES, PAY_TYPES, EmployeeOut
from smeease.screens.base import CrudScreenController, parse_number, require_fields
from smeease.utils.api_client import ResourceClient
from smeease.utils.errors import ValidationError

REQUIRED_FIELDS = (
    "name",
    "role",
    "department",
    "phone",
    "email",
    "joined_date",
    "preferred_day_off",
    "default_shift",
)


def generate_employee_id() -> str:
    return f"EMP-{random.randint(1000, 9999)}"


# Draft of the add/edit employee form, every field as typed
@dataclass(frozen=True)
class EmployeeForm:
    employee_id: str = ""
    name: str = ""
    role: str = ""
    department: str = ""
    phone: str = ""
    email: str = ""
    joined_date: str = ""
    status: str = "Active"
    pay_type: str = "salary"
    salary: str = ""
    hourly_rate: str = ""
    preferred_day_off: str = ""
    default_shift: str = ""


def _joined_date_iso(value: str) -> str:
    # Accept "YYYY-MM-DD" or a full ISO timestamp; midnight UTC goes out
    try:
        day = date.fromisoformat(value.strip()[:10])
    except ValueError:
        raise ValidationError("Joined date must be a valid date (YYYY-MM-DD).") from None
    return f"{day.isoformat()}T00:00:00.000Z"


def _number_text(value: Optional[float]) -> str:
    if value is None:
        return ""
    return str(int(value)) if float(value).is_integer() else str(value)


class EmployeeScreen(CrudScreenController[EmployeeOut]):
    resource_name = "employees"
    schema = EmployeeOut

    def __init__(self, resource: ResourceClient, id_factory=generate_employee_id):
        self.id_factory = id_factory
        super().__init__(resource)

    def empty_form(self) -> EmployeeForm:
        return EmployeeForm()

    def form_from(self, item: EmployeeOut) -> EmployeeForm:
        defaults = EmployeeForm()
        return EmployeeForm(
            employee_id=item.employee_id,
            name=item.name or "",
            role=item.role or "",
            department=item.department or "",
            phone=item.phone or "",
            email=item.email or "",
            joined_date=item.joined_date.isoformat()[:10] if item.joined_date else "",
            status=item.status or defaults.status,
            pay_type=item.pay_type or defaults.pay_type,
            salary=_number_text(item.salary),
            hourly_rate=_number_text(item.hourly_rate),
            preferred_day_off=item.preferred_day_off or "",
            default_shift=item.default_shift or "",
        )

    def item_id(self, item: EmployeeOut) -> str:
        return item.employee_id

    def build_payload(self, form: EmployeeForm, creating: bool) -> dict:
        require_fields(form, REQUIRED_FIELDS)
        if form.status not in EMPLOYEE_STATUSES:
            raise ValidationError(f"Status must be one of: {', '.join(EMPLOYEE_STATUSES)}.")
        if form.pay_type not in PAY_TYPES:
            raise ValidationError("Pay type must be salary or hourly.")

        # Only the field matching pay_type is sent; the other one may hold a
        # stale value from before the pay type was switched
        salary = hourly_rate = None
        if form.pay_type == "salary":
            salary = parse_number(form.salary, "Salary", minimum=0)
        else:
            hourly_rate = parse_number(form.hourly_rate, "Hourly rate", minimum=0)

        payload = {
            "employee_id": form.employee_id.strip(),
            "name": form.name.strip(),
            "role": form.role.strip(),
            "department": form.department.strip(),
            "phone": form.phone.strip(),
            "email": form.email.strip(),
            "joined_date": _joined_date_iso(form.joined_date),
            "status": form.status,
            "pay_type": form.pay_type,
            "salary": salary,
            "hourly_rate": hourly_rate,
            "preferred_day_off": form.preferred_day_off.strip(),
            "default_shift": form.default_shift.strip(),
        }
        if creating and not payload["employee_id"]:
            payload["employee_id"] = self.id_factory()
        return payload
