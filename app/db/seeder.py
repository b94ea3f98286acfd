# app/db/seeder.py
"""
Create the dashboard tables and upsert the fixture rows into them.

Within one table the upserts run concurrently, each statement in its own
transaction on its own pooled connection. Tables are seeded one after another
(users -> customers -> invoices -> revenue) and the first failing table stops
the run. Rows committed by earlier tables stay committed.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, TypeVar

from sqlalchemy import Table
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.db.schema import customers, invoices, metadata, revenue, users
from app.models.customers import CustomerRecord
from app.models.invoices import InvoiceRecord
from app.models.revenue import RevenueRecord
from app.models.seed import SeedFixtures, SeedSummary
from app.models.users import UserRecord
from app.security import hash_password

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "An unknown error occurred"

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

R = TypeVar("R")
InsertFactory = Callable[[Table], object]


class SeedingError(Exception):
    """A database failure while creating the schema or upserting one of the tables."""

    def __init__(self, step: str, message: str):
        super().__init__(message)
        self.step = step
        self.message = message


def describe_error(exc: BaseException) -> str:
    # Prefer the driver's own message over SQLAlchemy's wrapped one (which carries the SQL).
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        message = str(exc.orig)
    else:
        message = str(exc)
    return message.strip() or UNKNOWN_ERROR


def _dialect_insert(engine: Engine, step: str) -> InsertFactory:
    try:
        return _DIALECT_INSERTS[engine.dialect.name]
    except KeyError:
        raise SeedingError(step, f"Upserts are not supported on the {engine.dialect.name!r} dialect") from None


def _upsert_each(
    engine: Engine,
    step: str,
    records: Iterable[R],
    build_stmt: Callable[[InsertFactory, R], object],
) -> int:
    """
    Run one upsert statement per record, all at once, and wait for every one of them.

    Raises SeedingError for the first failed statement (in submission order) once
    the whole batch has finished.
    """
    records = list(records)
    if not records:
        logger.info("Upserted 0 %s", step)
        return 0

    insert = _dialect_insert(engine, step)

    def run(record: R) -> None:
        stmt = build_stmt(insert, record)
        with engine.begin() as conn:
            conn.execute(stmt)

    max_workers = min(settings.seed_max_workers, len(records))
    if isinstance(engine.pool, StaticPool):
        # a single shared connection cannot hold concurrent transactions
        max_workers = 1
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=f"seed-{step}") as executor:
        futures = [executor.submit(run, record) for record in records]

    errors: List[BaseException] = [f.exception() for f in futures if f.exception() is not None]
    if errors:
        logger.warning("%s of %s %s upserts failed", len(errors), len(records), step)
        first = errors[0]
        if isinstance(first, SQLAlchemyError):
            raise SeedingError(step, describe_error(first)) from first
        raise first

    logger.info("Upserted %s %s", len(records), step)
    return len(records)


# ---- Statements ----

def _user_stmt(insert: InsertFactory, user: UserRecord):
    stmt = insert(users).values(
        id=user.id,
        name=user.name,
        email=user.email,
        password=hash_password(user.password),
    )
    return stmt.on_conflict_do_update(
        index_elements=[users.c.id],
        set_={
            "name": stmt.excluded.name,
            "password": stmt.excluded.password,
        },
    )


def _customer_stmt(insert: InsertFactory, customer: CustomerRecord):
    stmt = insert(customers).values(
        id=customer.id,
        name=customer.name,
        email=customer.email,
        image_url=customer.image_url,
    )
    return stmt.on_conflict_do_update(
        index_elements=[customers.c.email],
        set_={
            "name": stmt.excluded.name,
            "image_url": stmt.excluded.image_url,
        },
    )


def _invoice_stmt(insert: InsertFactory, invoice: InvoiceRecord):
    # without an id the column default assigns one
    stmt = insert(invoices).values(**invoice.model_dump(exclude_none=True))
    return stmt.on_conflict_do_update(
        index_elements=[invoices.c.id],
        set_={
            "customer_id": stmt.excluded.customer_id,
            "amount": stmt.excluded.amount,
            "status": stmt.excluded.status,
            "date": stmt.excluded.date,
        },
    )


def _revenue_stmt(insert: InsertFactory, point: RevenueRecord):
    stmt = insert(revenue).values(month=point.month, revenue=point.revenue)
    return stmt.on_conflict_do_update(
        index_elements=[revenue.c.month],
        set_={"revenue": stmt.excluded.revenue},
    )


# ---- Operations ----

def ensure_schema(engine: Engine) -> None:
    """Create the four tables if they are missing. Existing tables are left untouched."""
    try:
        metadata.create_all(engine, checkfirst=True)
    except SQLAlchemyError as exc:
        raise SeedingError("schema", describe_error(exc)) from exc


def upsert_users(engine: Engine, user_list: Iterable[UserRecord]) -> int:
    return _upsert_each(engine, "users", user_list, _user_stmt)


def upsert_customers(engine: Engine, customer_list: Iterable[CustomerRecord]) -> int:
    return _upsert_each(engine, "customers", customer_list, _customer_stmt)


def upsert_invoices(engine: Engine, invoice_list: Iterable[InvoiceRecord]) -> int:
    return _upsert_each(engine, "invoices", invoice_list, _invoice_stmt)


def upsert_revenue(engine: Engine, revenue_list: Iterable[RevenueRecord]) -> int:
    return _upsert_each(engine, "revenue", revenue_list, _revenue_stmt)


def seed_all(engine: Engine, fixtures: SeedFixtures) -> SeedSummary:
    """
    Create the schema, then upsert users, customers, invoices and revenue in that order.

    Customers go before invoices because invoices carry customer ids.
    Returns the number of rows upserted per table.
    """
    ensure_schema(engine)

    summary: SeedSummary = {}
    summary["users"] = upsert_users(engine, fixtures.users)
    summary["customers"] = upsert_customers(engine, fixtures.customers)
    summary["invoices"] = upsert_invoices(engine, fixtures.invoices)
    summary["revenue"] = upsert_revenue(engine, fixtures.revenue)

    logger.info("Database seeded: %s", summary)
    return summary
