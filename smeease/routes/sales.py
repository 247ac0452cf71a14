# smeease/routes/sales.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from smeease.database import get_db
from smeease.models.product import Product
from smeease.models.sale import Sale
from smeease.utils.audit import write_log
from smeease.utils.updates import apply_changes
import smeease.schemas.sale as sale_schemas

router = APIRouter(prefix="/sales", tags=["Sales"])


def _get_or_404(db: Session, sale_id: int) -> Sale:
    sale = db.query(Sale).filter(Sale.sale_id == sale_id).first()
    if not sale:
        raise HTTPException(status_code=404, detail="Sale not found")
    return sale


def _require_product(db: Session, upc: str):
    if not db.query(Product).filter(Product.upc == upc).first():
        raise HTTPException(status_code=400, detail=f"Product {upc} does not exist")


@router.get("", response_model=List[sale_schemas.SaleOut])
def list_sales(db: Session = Depends(get_db)):
    # Newest first
    return db.query(Sale).order_by(Sale.sale_id.desc()).all()


@router.get("/{sale_id}", response_model=sale_schemas.SaleOut)
def get_sale(sale_id: int, db: Session = Depends(get_db)):
    return _get_or_404(db, sale_id)


@router.post("", response_model=sale_schemas.SaleOut, status_code=201)
def create_sale(payload: sale_schemas.SaleCreate, request: Request, db: Session = Depends(get_db)):
    _require_product(db, payload.upc)

    # Leave sale_date to the server default when it was not sent
    sale = Sale(**payload.model_dump(exclude_none=True))
    db.add(sale)
    db.commit()
    db.refresh(sale)

    write_log(
        db, action="SALE_CREATE", resource="sales",
        ip=request.client.host if request.client else None,
        meta={"id": sale.sale_id, "upc": sale.upc, "quantity": sale.quantity},
    )
    return sale


@router.put("/{sale_id}", response_model=sale_schemas.SaleOut)
def update_sale(sale_id: int, payload: sale_schemas.SaleUpdate, request: Request, db: Session = Depends(get_db)):
    sale = _get_or_404(db, sale_id)

    changes = payload.model_dump(exclude_unset=True)
    if changes.get("upc"):
        _require_product(db, changes["upc"])
    apply_changes(sale, changes)

    db.commit()
    db.refresh(sale)
    write_log(db, action="SALE_UPDATE", resource="sales", ip=request.client.host if request.client else None, meta={"id": sale.sale_id})
    return sale


@router.delete("/{sale_id}")
def delete_sale(sale_id: int, request: Request, db: Session = Depends(get_db)):
    sale = _get_or_404(db, sale_id)
    db.delete(sale)
    db.commit()
    write_log(db, action="SALE_DELETE", resource="sales", ip=request.client.host if request.client else None, meta={"id": sale_id})
    return {"message": "Sale deleted"}
