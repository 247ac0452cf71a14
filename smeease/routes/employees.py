# smeease/routes/employees.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from smeease.database import get_db
from smeease.models.employee import Employee
from smeease.utils.audit import write_log
import smeease.schemas.employee as employee_schemas

router = APIRouter(prefix="/employees", tags=["Employees"])


def _client_ip(request: Request):
    return request.client.host if request.client else None


def _get_or_404(db: Session, employee_id: str) -> Employee:
    emp = db.query(Employee).filter(Employee.employee_id == employee_id).first()
    if not emp:
        raise HTTPException(status_code=404, detail="Employee not found")
    return emp


@router.get("", response_model=List[employee_schemas.EmployeeOut])
def list_employees(db: Session = Depends(get_db)):
    return db.query(Employee).order_by(Employee.name.asc()).all()


@router.get("/{employee_id}", response_model=employee_schemas.EmployeeOut)
def get_employee(employee_id: str, db: Session = Depends(get_db)):
    return _get_or_404(db, employee_id)


@router.post("", response_model=employee_schemas.EmployeeOut, status_code=201)
def create_employee(payload: employee_schemas.EmployeeCreate, request: Request, db: Session = Depends(get_db)):
    employee_id = payload.employee_id.strip()
    if db.query(Employee).filter(Employee.employee_id == employee_id).first():
        raise HTTPException(status_code=409, detail="Employee ID already exists")

    emp = Employee(**payload.model_dump(exclude={"employee_id"}), employee_id=employee_id)
    db.add(emp)
    db.commit()
    db.refresh(emp)

    write_log(db, action="EMPLOYEE_CREATE", resource="employees", ip=_client_ip(request), meta={"id": emp.employee_id})
    return emp


# Full replace of the editable fields; the identifier never changes
@router.put("/{employee_id}", response_model=employee_schemas.EmployeeOut)
def update_employee(employee_id: str, payload: employee_schemas.EmployeeUpdate, request: Request, db: Session = Depends(get_db)):
    emp = _get_or_404(db, employee_id)

    for key, value in payload.model_dump(exclude={"employee_id"}).items():
        setattr(emp, key, value)

    db.commit()
    db.refresh(emp)

    write_log(db, action="EMPLOYEE_UPDATE", resource="employees", ip=_client_ip(request), meta={"id": emp.employee_id})
    return emp


@router.delete("/{employee_id}")
def delete_employee(employee_id: str, request: Request, db: Session = Depends(get_db)):
    emp = _get_or_404(db, employee_id)
    db.delete(emp)
    db.commit()
    write_log(db, action="EMPLOYEE_DELETE", resource="employees", ip=_client_ip(request), meta={"id": employee_id})
    return {"message": "Employee deleted"}
