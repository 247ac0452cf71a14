# smeease/seed_db.py
"""Fill an empty database with a few suppliers, products and employees."""
import logging
from datetime import date, datetime

from sqlalchemy.orm import Session

from smeease.config import settings
from smeease.database import SessionLocal, init_db
from smeease.models.employee import Employee
from smeease.models.payroll import PayrollPeriod
from smeease.models.product import Product
from smeease.models.supplier import Supplier
from smeease.models.tax_document import TaxDocument

logger = logging.getLogger(__name__)

SUPPLIERS = [
    {"name": "Fresh Farms Ltd", "contact": "+1 555 0100", "email": "orders@freshfarms.example"},
    {"name": "Metro Wholesale", "contact": "+1 555 0142", "email": "sales@metro.example"},
]

# (upc, name, stock, sold, min_stock, supplier index)
PRODUCTS = [
    ("012345678905", "Whole Milk 1L", 40, 310, 25, 0),
    ("036000291452", "Free Range Eggs (12)", 0, 188, 10, 0),
    ("042100005264", "Paper Towels 6-pack", 12, 95, 20, 1),
    ("070662404072", "Ground Coffee 500g", 55, 140, 15, 1),
]

EMPLOYEES = [
    {
        "employee_id": "EMP-1001", "name": "Alex Morgan", "role": "Store Manager",
        "department": "Operations", "phone": "+1 555 0190", "email": "alex@smeease.example",
        "joined_date": datetime(2021, 3, 1), "status": "Active", "pay_type": "salary",
        "salary": 52000.0, "hourly_rate": None,
        "preferred_day_off": "Sunday", "default_shift": "Morning",
    },
    {
        "employee_id": "EMP-1002", "name": "Sam Rivera", "role": "Cashier",
        "department": "Sales", "phone": "+1 555 0191", "email": "sam@smeease.example",
        "joined_date": datetime(2023, 6, 12), "status": "Active", "pay_type": "hourly",
        "salary": None, "hourly_rate": 16.5,
        "preferred_day_off": "Wednesday", "default_shift": "Evening",
    },
]


def seed(db: Session) -> bool:
    """Insert the sample rows. Returns False when data is already present."""
    if db.query(Supplier).first() or db.query(Employee).first():
        logger.info("Database already has data, skipping seed")
        return False

    suppliers = [Supplier(**data) for data in SUPPLIERS]
    db.add_all(suppliers)
    db.flush()

    for upc, name, stock, sold, min_stock, idx in PRODUCTS:
        db.add(Product(
            upc=upc, name=name, stock=stock, sold=sold, min_stock=min_stock,
            supplier_id=suppliers[idx].supplier_id,
        ))

    db.add_all([Employee(**data) for data in EMPLOYEES])
    db.add(PayrollPeriod(start_date=date(2024, 1, 1), end_date=date(2024, 1, 31), status="Closed"))
    db.add(TaxDocument(title="Q1 VAT return", doc_type="VAT", tax_year=2024, amount=1830.0,
                       due_date=date(2024, 4, 30), status="Filed"))
    db.commit()
    logger.info("Seeded %d suppliers, %d products, %d employees", len(SUPPLIERS), len(PRODUCTS), len(EMPLOYEES))
    return True


def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    init_db()
    db = SessionLocal()
    try:
        seed(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
