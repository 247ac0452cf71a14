# smeease/routes/payroll.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from smeease.database import get_db
from smeease.models.employee import Employee
from smeease.models.payroll import PayrollPeriod, Payslip
from smeease.utils.audit import write_log
from smeease.utils.updates import apply_changes
import smeease.schemas.payroll as payroll_schemas

# Payroll periods and payslips are two flat collections on the API
periods_router = APIRouter(prefix="/payroll-periods", tags=["Payroll"])
payslips_router = APIRouter(prefix="/payslips", tags=["Payroll"])


def _client_ip(request: Request):
    return request.client.host if request.client else None


def _get_period_or_404(db: Session, period_id: int) -> PayrollPeriod:
    period = db.query(PayrollPeriod).filter(PayrollPeriod.period_id == period_id).first()
    if not period:
        raise HTTPException(status_code=404, detail="Payroll period not found")
    return period


def _get_payslip_or_404(db: Session, payslip_id: int) -> Payslip:
    payslip = db.query(Payslip).filter(Payslip.payslip_id == payslip_id).first()
    if not payslip:
        raise HTTPException(status_code=404, detail="Payslip not found")
    return payslip


# ==========================================
#  PAYROLL PERIODS
# ==========================================
@periods_router.get("", response_model=List[payroll_schemas.PayrollPeriodOut])
def list_periods(db: Session = Depends(get_db)):
    return db.query(PayrollPeriod).order_by(PayrollPeriod.start_date.desc()).all()


@periods_router.get("/{period_id}", response_model=payroll_schemas.PayrollPeriodOut)
def get_period(period_id: int, db: Session = Depends(get_db)):
    return _get_period_or_404(db, period_id)


@periods_router.post("", response_model=payroll_schemas.PayrollPeriodOut, status_code=201)
def create_period(payload: payroll_schemas.PayrollPeriodCreate, request: Request, db: Session = Depends(get_db)):
    period = PayrollPeriod(**payload.model_dump())
    db.add(period)
    db.commit()
    db.refresh(period)
    write_log(db, action="PAYROLL_PERIOD_CREATE", resource="payroll-periods", ip=_client_ip(request), meta={"id": period.period_id})
    return period


@periods_router.put("/{period_id}", response_model=payroll_schemas.PayrollPeriodOut)
def update_period(period_id: int, payload: payroll_schemas.PayrollPeriodUpdate, request: Request, db: Session = Depends(get_db)):
    period = _get_period_or_404(db, period_id)
    apply_changes(period, payload.model_dump(exclude_unset=True))

    if period.end_date < period.start_date:
        db.rollback()
        raise HTTPException(status_code=400, detail="end_date must not be before start_date")

    db.commit()
    db.refresh(period)
    write_log(db, action="PAYROLL_PERIOD_UPDATE", resource="payroll-periods", ip=_client_ip(request), meta={"id": period.period_id})
    return period


@periods_router.delete("/{period_id}")
def delete_period(period_id: int, request: Request, db: Session = Depends(get_db)):
    period = _get_period_or_404(db, period_id)
    if period.payslips:
        raise HTTPException(status_code=409, detail="Payroll period still has payslips")
    db.delete(period)
    db.commit()
    write_log(db, action="PAYROLL_PERIOD_DELETE", resource="payroll-periods", ip=_client_ip(request), meta={"id": period_id})
    return {"message": "Payroll period deleted"}


# ==========================================
#  PAYSLIPS
# ==========================================
@payslips_router.get("", response_model=List[payroll_schemas.PayslipOut])
def list_payslips(db: Session = Depends(get_db)):
    return db.query(Payslip).order_by(Payslip.payslip_id.asc()).all()


@payslips_router.get("/{payslip_id}", response_model=payroll_schemas.PayslipOut)
def get_payslip(payslip_id: int, db: Session = Depends(get_db)):
    return _get_payslip_or_404(db, payslip_id)


@payslips_router.post("", response_model=payroll_schemas.PayslipOut, status_code=201)
def create_payslip(payload: payroll_schemas.PayslipCreate, request: Request, db: Session = Depends(get_db)):
    if not db.query(Employee).filter(Employee.employee_id == payload.employee_id).first():
        raise HTTPException(status_code=400, detail=f"Employee {payload.employee_id} does not exist")
    period = _get_period_or_404(db, payload.period_id)
    if period.status == "Closed":
        raise HTTPException(status_code=409, detail="Payroll period is closed")

    payslip = Payslip(**payload.model_dump())
    db.add(payslip)
    db.commit()
    db.refresh(payslip)
    write_log(db, action="PAYSLIP_CREATE", resource="payslips", ip=_client_ip(request), meta={"id": payslip.payslip_id})
    return payslip


@payslips_router.put("/{payslip_id}", response_model=payroll_schemas.PayslipOut)
def update_payslip(payslip_id: int, payload: payroll_schemas.PayslipUpdate, request: Request, db: Session = Depends(get_db)):
    payslip = _get_payslip_or_404(db, payslip_id)
    apply_changes(payslip, payload.model_dump(exclude_unset=True))

    db.commit()
    db.refresh(payslip)
    write_log(db, action="PAYSLIP_UPDATE", resource="payslips", ip=_client_ip(request), meta={"id": payslip.payslip_id})
    return payslip


@payslips_router.delete("/{payslip_id}")
def delete_payslip(payslip_id: int, request: Request, db: Session = Depends(get_db)):
    payslip = _get_payslip_or_404(db, payslip_id)
    db.delete(payslip)
    db.commit()
    write_log(db, action="PAYSLIP_DELETE", resource="payslips", ip=_client_ip(request), meta={"id": payslip_id})
    return {"message": "Payslip deleted"}
