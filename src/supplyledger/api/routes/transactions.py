"""Transaction endpoints."""

from fastapi import APIRouter, Depends

from supplyledger.api.dependencies import get_summary_service, get_transaction_service
from supplyledger.api.schemas import TransactionCreate, TransactionRead
from supplyledger.domain.summary import SummaryService
from supplyledger.domain.transaction import TransactionService

router = APIRouter()


@router.post("", response_model=TransactionRead)
def create_transaction(
    transaction_in: TransactionCreate,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionRead:
    """Store a new transaction and echo it back with its assigned ID."""
    transaction = service.create_transaction(**transaction_in.model_dump())
    return TransactionRead.from_entity(transaction)


@router.get("", response_model=list[TransactionRead])
def list_transactions(
    service: TransactionService = Depends(get_transaction_service),
) -> list[TransactionRead]:
    """Return every stored transaction."""
    return [TransactionRead.from_entity(t) for t in service.list_transactions()]


@router.get("/total_spent", response_model=float)
def total_spent(service: SummaryService = Depends(get_summary_service)) -> float:
    """Return the sum of TransactionValueNOK over all transactions."""
    return service.total_spent()


@router.get("/{transaction_id}", response_model=TransactionRead)
def get_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionRead:
    """Retrieve a single transaction by ID. Returns HTTP 404 if absent."""
    return TransactionRead.from_entity(service.get_transaction(transaction_id))
