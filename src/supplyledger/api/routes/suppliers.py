"""Supplier endpoints.

``/total_suppliers`` is declared before ``/{supplier_id}`` so it is not
captured by the ID route.
"""

from fastapi import APIRouter, Depends

from supplyledger.api.dependencies import get_summary_service, get_supplier_service
from supplyledger.api.schemas import SupplierCreate, SupplierRead
from supplyledger.domain.summary import SummaryService
from supplyledger.domain.supplier import SupplierService

router = APIRouter()


@router.post("", response_model=SupplierRead)
def create_supplier(
    supplier_in: SupplierCreate,
    service: SupplierService = Depends(get_supplier_service),
) -> SupplierRead:
    """Store a new supplier and echo it back with its assigned ID."""
    supplier = service.create_supplier(**supplier_in.model_dump())
    return SupplierRead.from_entity(supplier)


@router.get("", response_model=list[SupplierRead])
def list_suppliers(service: SupplierService = Depends(get_supplier_service)) -> list[SupplierRead]:
    """Return every stored supplier."""
    return [SupplierRead.from_entity(s) for s in service.list_suppliers()]


@router.get("/total_suppliers", response_model=int)
def total_suppliers(service: SummaryService = Depends(get_summary_service)) -> int:
    """Return the number of stored suppliers."""
    return service.total_suppliers()


@router.get("/{supplier_id}", response_model=SupplierRead)
def get_supplier(
    supplier_id: int,
    service: SupplierService = Depends(get_supplier_service),
) -> SupplierRead:
    """Retrieve a single supplier by ID. Returns HTTP 404 if absent."""
    return SupplierRead.from_entity(service.get_supplier(supplier_id))
