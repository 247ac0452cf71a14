# smeease/routes/suppliers.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from smeease.database import get_db
from smeease.models.product import Product
from smeease.models.supplier import Supplier
from smeease.utils.audit import write_log
from smeease.utils.updates import apply_changes
import smeease.schemas.supplier as supplier_schemas

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


def _get_or_404(db: Session, supplier_id: int) -> Supplier:
    supplier = db.query(Supplier).filter(Supplier.supplier_id == supplier_id).first()
    if not supplier:
        raise HTTPException(status_code=404, detail="Supplier not found")
    return supplier


@router.get("", response_model=List[supplier_schemas.SupplierOut])
def list_suppliers(db: Session = Depends(get_db)):
    return db.query(Supplier).order_by(Supplier.supplier_id.asc()).all()


@router.get("/{supplier_id}", response_model=supplier_schemas.SupplierOut)
def get_supplier(supplier_id: int, db: Session = Depends(get_db)):
    return _get_or_404(db, supplier_id)


@router.post("", response_model=supplier_schemas.SupplierOut, status_code=201)
def create_supplier(payload: supplier_schemas.SupplierCreate, request: Request, db: Session = Depends(get_db)):
    supplier = Supplier(**payload.model_dump())
    db.add(supplier)
    db.commit()
    db.refresh(supplier)

    write_log(
        db, action="SUPPLIER_CREATE", resource="suppliers",
        ip=request.client.host if request.client else None,
        meta={"id": supplier.supplier_id},
    )
    return supplier


@router.put("/{supplier_id}", response_model=supplier_schemas.SupplierOut)
def update_supplier(supplier_id: int, payload: supplier_schemas.SupplierUpdate, request: Request, db: Session = Depends(get_db)):
    supplier = _get_or_404(db, supplier_id)

    apply_changes(supplier, payload.model_dump(exclude_unset=True))

    db.commit()
    db.refresh(supplier)

    write_log(
        db, action="SUPPLIER_UPDATE", resource="suppliers",
        ip=request.client.host if request.client else None,
        meta={"id": supplier.supplier_id},
    )
    return supplier


@router.delete("/{supplier_id}")
def delete_supplier(supplier_id: int, request: Request, db: Session = Depends(get_db)):
    supplier = _get_or_404(db, supplier_id)

    # Products carry a non-null foreign key to their supplier
    in_use = db.query(Product).filter(Product.supplier_id == supplier_id).count()
    if in_use:
        raise HTTPException(status_code=409, detail=f"Supplier is still referenced by {in_use} product(s)")

    db.delete(supplier)
    db.commit()
    write_log(
        db, action="SUPPLIER_DELETE", resource="suppliers",
        ip=request.client.host if request.client else None,
        meta={"id": supplier_id},
    )
    return {"message": "Supplier deleted"}
