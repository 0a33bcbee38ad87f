"""Pydantic schemas for the supplier and transaction payloads.

Field aliases are the JSON names clients send and receive (``Supplier``,
``VatID``, ``InvoiceDate`` ...). Python code uses the snake_case names.
Dates cross the wire as ISO-8601 text with an explicit UTC offset.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from supplyledger.domain.entities import Supplier, Transaction
from supplyledger.utils.instant_codec import decode_optional_instant, encode_optional_instant


class SupplierCreate(BaseModel):
    """Schema for submitting a new supplier."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="Supplier", description="Supplier display name")
    name_original: str = Field(..., alias="SupplierNameOriginal", description="Original supplier name")
    country: str = Field(..., alias="SupplierCountry")
    vat_id: str = Field(..., alias="VatID")
    nace: str = Field(..., alias="NACE", description="NACE industry code")


class SupplierRead(SupplierCreate):
    """Schema for reading a supplier."""

    id: int

    @classmethod
    def from_entity(cls, supplier: Supplier) -> "SupplierRead":
        return cls(
            id=supplier.id,
            name=supplier.name,
            name_original=supplier.name_original,
            country=supplier.country,
            vat_id=supplier.vat_id,
            nace=supplier.nace,
        )


class TransactionCreate(BaseModel):
    """Schema for submitting a new transaction."""

    model_config = ConfigDict(populate_by_name=True)

    invoice_number: str = Field(..., alias="InvoiceNumber")
    supplier: str = Field(..., alias="Supplier", description="Supplier display name (not an ID)")
    invoice_date: Optional[datetime] = Field(None, alias="InvoiceDate")
    due_date: Optional[datetime] = Field(None, alias="DueDate")
    value_nok: float = Field(..., alias="TransactionValueNOK", allow_inf_nan=False)
    spend_category_l1: str = Field(..., alias="SpendCategoryL1")
    spend_category_l2: str = Field(..., alias="SpendCategoryL2")
    spend_category_l3: str = Field(..., alias="SpendCategoryL3")
    spend_category_l4: str = Field(..., alias="SpendCategoryL4")

    @field_validator("invoice_date", "due_date", mode="before")
    @classmethod
    def decode_instant(cls, v: Any) -> Any:
        # ValidationError subclasses ValueError, so pydantic reports it as a field error
        if isinstance(v, str):
            return decode_optional_instant(v)
        if isinstance(v, datetime) and v.utcoffset() is None:
            raise ValueError("Timestamp must carry an explicit UTC offset")
        return v


class TransactionRead(TransactionCreate):
    """Schema for reading a transaction."""

    id: int

    @field_serializer("invoice_date", "due_date")
    def encode_instant(self, v: Optional[datetime]) -> Optional[str]:
        return encode_optional_instant(v)

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionRead":
        return cls(
            id=transaction.id,
            invoice_number=transaction.invoice_number,
            supplier=transaction.supplier,
            invoice_date=transaction.invoice_date,
            due_date=transaction.due_date,
            value_nok=transaction.value_nok,
            spend_category_l1=transaction.spend_category_l1,
            spend_category_l2=transaction.spend_category_l2,
            spend_category_l3=transaction.spend_category_l3,
            spend_category_l4=transaction.spend_category_l4,
        )
