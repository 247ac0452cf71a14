from smeease.models.employee import Employee
from smeease.models.supplier import Supplier
from smeease.models.product import Product
from smeease.models.sale import Sale
from smeease.models.payroll import PayrollPeriod, Payslip
from smeease.models.tax_document import TaxDocument
from smeease.models.log import Log

__all__ = [
    "Employee",
    "Supplier",
    "Product",
    "Sale",
    "PayrollPeriod",
    "Payslip",
    "TaxDocument",
    "Log",
]
