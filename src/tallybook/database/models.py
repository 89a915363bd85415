"""SQLAlchemy models for the tallybook database."""

from datetime import datetime, UTC
from decimal import Decimal
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()

INCOME = "INCOME"
EXPENSE = "EXPENSE"

# Decimal places kept by the amount column
AMOUNT_SCALE = 6


class Owner(Base):
    """Owner (user) model. Authentication happens outside tallybook."""

    __tablename__ = "owners"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="owner", cascade="all, delete-orphan")


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    owner_id = Column(Integer, ForeignKey("owners.id"), nullable=False, index=True)
    # Redundant with the amount sign, kept for readers of the raw table
    type = Column(String(7), nullable=False)
    amount = Column(Numeric(18, AMOUNT_SCALE), nullable=False)
    description = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    date = Column(Date, nullable=False)

    # Relationships
    owner = relationship("Owner", back_populates="transactions")


def transaction_type(amount) -> str:
    """Return the type discriminator stored for an amount."""
    return INCOME if amount >= 0 else EXPENSE


def fits_amount_column(amount: Decimal) -> bool:
    """Whether ``amount`` can be stored without rounding."""
    return amount.normalize().as_tuple().exponent >= -AMOUNT_SCALE


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory and make sure the schema exists."""
    engine: Engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
