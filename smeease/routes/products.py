# smeease/routes/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from smeease.database import get_db
from smeease.models.product import Product
from smeease.models.supplier import Supplier
from smeease.utils.audit import write_log
from smeease.utils.updates import apply_changes
import smeease.schemas.product as product_schemas

router = APIRouter(prefix="/products", tags=["Products"])


# ---- HELPERS ----
def _get_or_404(db: Session, upc: str) -> Product:
    product = db.query(Product).filter(Product.upc == upc).first()
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


def _require_supplier(db: Session, supplier_id: int):
    if not db.query(Supplier).filter(Supplier.supplier_id == supplier_id).first():
        raise HTTPException(status_code=400, detail=f"Supplier {supplier_id} does not exist")


# =========================
# PRODUCT LIST
# =========================
@router.get("", response_model=List[product_schemas.ProductOut])
def list_products(db: Session = Depends(get_db)):
    return db.query(Product).order_by(Product.name.asc()).all()


@router.get("/{upc}", response_model=product_schemas.ProductOut)
def get_product(upc: str, db: Session = Depends(get_db)):
    return _get_or_404(db, upc)


# =========================
# CREATE
# =========================
@router.post("", response_model=product_schemas.ProductOut, status_code=201)
def create_product(payload: product_schemas.ProductCreate, request: Request, db: Session = Depends(get_db)):
    upc = payload.upc.strip()
    if db.query(Product).filter(Product.upc == upc).first():
        raise HTTPException(status_code=409, detail="UPC must be unique.")
    _require_supplier(db, payload.supplier_id)

    product = Product(**payload.model_dump(exclude={"upc"}), upc=upc)
    db.add(product)
    db.commit()
    db.refresh(product)

    write_log(
        db, action="PRODUCT_CREATE", resource="products",
        ip=request.client.host if request.client else None,
        meta={"upc": product.upc, "supplier_id": product.supplier_id},
    )
    return product


# =========================
# UPDATE (fields sent are replaced, UPC stays)
# =========================
@router.put("/{upc}", response_model=product_schemas.ProductOut)
def update_product(upc: str, payload: product_schemas.ProductUpdate, request: Request, db: Session = Depends(get_db)):
    product = _get_or_404(db, upc)

    changes = payload.model_dump(exclude_unset=True)
    if changes.get("supplier_id") is not None:
        _require_supplier(db, changes["supplier_id"])

    apply_changes(product, changes)

    db.commit()
    db.refresh(product)

    write_log(
        db, action="PRODUCT_UPDATE", resource="products",
        ip=request.client.host if request.client else None,
        meta={"upc": product.upc},
    )
    return product


# =========================
# DELETE
# =========================
@router.delete("/{upc}")
def delete_product(upc: str, request: Request, db: Session = Depends(get_db)):
    product = _get_or_404(db, upc)
    db.delete(product)
    db.commit()
    write_log(
        db, action="PRODUCT_DELETE", resource="products",
        ip=request.client.host if request.client else None,
        meta={"upc": upc},
    )
    return {"message": "Product deleted"}
