"""SQLAlchemy models for supplyledger database.

Column names match the JSON field names used by the API so that databases
created by earlier deployments remain readable.
"""

from sqlalchemy import Column, Integer, String, Float, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Supplier(Base):
    """Supplier model."""

    __tablename__ = "suppliers"
    # AUTOINCREMENT keeps IDs strictly increasing, never reused
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    name = Column("Supplier", String, nullable=False)
    name_original = Column("SupplierNameOriginal", String, nullable=False)
    country = Column("SupplierCountry", String, nullable=False)
    vat_id = Column("VatID", String, nullable=False)
    nace = Column("NACE", String, nullable=False)


class Transaction(Base):
    """Transaction model.

    ``supplier`` holds the supplier name as free text; there is no foreign key.
    Dates are stored as canonical ISO-8601 text, NULL when absent.
    """

    __tablename__ = "transactions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    invoice_number = Column("InvoiceNumber", String, nullable=False)
    supplier = Column("Supplier", String, nullable=False)
    invoice_date = Column("InvoiceDate", String, nullable=True)
    due_date = Column("DueDate", String, nullable=True)
    value_nok = Column("TransactionValueNOK", Float, nullable=False)
    spend_category_l1 = Column("SpendCategoryL1", String, nullable=False)
    spend_category_l2 = Column("SpendCategoryL2", String, nullable=False)
    spend_category_l3 = Column("SpendCategoryL3", String, nullable=False)
    spend_category_l4 = Column("SpendCategoryL4", String, nullable=False)


def create_db_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine usable from multiple threads."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, echo=False, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    return sessionmaker(bind=engine, expire_on_commit=False)
