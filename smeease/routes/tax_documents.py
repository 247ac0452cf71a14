# smeease/routes/tax_documents.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from smeease.database import get_db
from smeease.models.tax_document import TaxDocument
from smeease.utils.audit import write_log
from smeease.utils.updates import apply_changes
import smeease.schemas.tax_document as tax_schemas

router = APIRouter(prefix="/tax-documents", tags=["Tax documents"])


def _get_or_404(db: Session, document_id: int) -> TaxDocument:
    doc = db.query(TaxDocument).filter(TaxDocument.document_id == document_id).first()
    if not doc:
        raise HTTPException(status_code=404, detail="Tax document not found")
    return doc


@router.get("", response_model=List[tax_schemas.TaxDocumentOut])
def list_tax_documents(db: Session = Depends(get_db)):
    return db.query(TaxDocument).order_by(TaxDocument.tax_year.desc(), TaxDocument.document_id.asc()).all()


@router.get("/{document_id}", response_model=tax_schemas.TaxDocumentOut)
def get_tax_document(document_id: int, db: Session = Depends(get_db)):
    return _get_or_404(db, document_id)


@router.post("", response_model=tax_schemas.TaxDocumentOut, status_code=201)
def create_tax_document(payload: tax_schemas.TaxDocumentCreate, request: Request, db: Session = Depends(get_db)):
    doc = TaxDocument(**payload.model_dump())
    db.add(doc)
    db.commit()
    db.refresh(doc)
    write_log(
        db, action="TAX_DOCUMENT_CREATE", resource="tax-documents",
        ip=request.client.host if request.client else None,
        meta={"id": doc.document_id, "tax_year": doc.tax_year},
    )
    return doc


@router.put("/{document_id}", response_model=tax_schemas.TaxDocumentOut)
def update_tax_document(document_id: int, payload: tax_schemas.TaxDocumentUpdate, request: Request, db: Session = Depends(get_db)):
    doc = _get_or_404(db, document_id)
    apply_changes(doc, payload.model_dump(exclude_unset=True))

    db.commit()
    db.refresh(doc)
    write_log(
        db, action="TAX_DOCUMENT_UPDATE", resource="tax-documents",
        ip=request.client.host if request.client else None,
        meta={"id": doc.document_id},
    )
    return doc


@router.delete("/{document_id}")
def delete_tax_document(document_id: int, request: Request, db: Session = Depends(get_db)):
    doc = _get_or_404(db, document_id)
    db.delete(doc)
    db.commit()
    write_log(
        db, action="TAX_DOCUMENT_DELETE", resource="tax-documents",
        ip=request.client.host if request.client else None,
        meta={"id": document_id},
    )
    return {"message": "Tax document deleted"}
