from smeease.screens.base import CrudScreenController, Modal, ModalKind, ScreenController
from smeease.screens.employees import EmployeeForm, EmployeeScreen
from smeease.screens.inventory import InventoryScreen, ProductForm, ProductListScreen
from smeease.screens.orchestrator import ProductSupplierOrchestrator, StepStatus, WriteLog
from smeease.screens.overview import InventoryOverviewScreen

__all__ = [
    "Modal",
    "ModalKind",
    "ScreenController",
    "CrudScreenController",
    "EmployeeForm",
    "EmployeeScreen",
    "InventoryScreen",
    "ProductForm",
    "ProductListScreen",
    "ProductSupplierOrchestrator",
    "StepStatus",
    "WriteLog",
    "InventoryOverviewScreen",
]
