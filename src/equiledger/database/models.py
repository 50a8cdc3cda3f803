"""SQLAlchemy models for equiledger database."""

import uuid
from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Numeric,
    Enum,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from equiledger.domain.entities import ExpenseCategory, PaymentMethod

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(UTC)


class Sale(Base):
    """Sale model."""

    __tablename__ = "sales"

    id = Column(String(36), primary_key=True, default=_new_id)
    supplier_id = Column(String, nullable=False, index=True)
    product_name = Column(String, nullable=False)
    sale_value = Column(Numeric(12, 2), nullable=False)
    profit = Column(Numeric(12, 2), nullable=False)
    payment_method = Column(
        Enum(PaymentMethod, values_callable=lambda e: [m.value for m in e]), nullable=True
    )
    supplier_client_id = Column(String(36), nullable=True)
    created_at = Column(DateTime(timezone=True), default=_now, nullable=False)


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"

    id = Column(String(36), primary_key=True, default=_new_id)
    supplier_id = Column(String, nullable=False, index=True)
    category = Column(
        Enum(ExpenseCategory, values_callable=lambda e: [m.value for m in e]), nullable=False
    )
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(String, nullable=True)
    expense_date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_now, nullable=False)


class SupplierFinancialSettings(Base):
    """One settings row per supplier."""

    __tablename__ = "supplier_financial_settings"

    supplier_id = Column(String, primary_key=True)
    tax_rate = Column(Numeric(5, 2), default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_now, onupdate=_now, nullable=False)


class Product(Base):
    """Catalog product model."""

    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=_new_id)
    supplier_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    original_price = Column(Numeric(12, 2), nullable=True)
    discount_percentage = Column(Integer, nullable=True)
    max_installments = Column(Integer, nullable=True)
    interest_free_installments = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_now, nullable=False)


class SupplierClient(Base):
    """A supplier's own customer."""

    __tablename__ = "supplier_clients"

    id = Column(String(36), primary_key=True, default=_new_id)
    supplier_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), default=_now, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
