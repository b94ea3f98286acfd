# app/db/schema.py

import uuid

from sqlalchemy import Column, Date, Integer, MetaData, String, Table, Text

metadata = MetaData()


def _new_id() -> str:
    return str(uuid.uuid4())


users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("name", String(255), nullable=False),
    Column("email", Text, nullable=False, unique=True),
    Column("password", Text, nullable=False),
)

customers = Table(
    "customers",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("image_url", String(255), nullable=False),
)

# customer_id points at customers.id without a ForeignKey constraint
invoices = Table(
    "invoices",
    metadata,
    Column("id", String(36), primary_key=True, default=_new_id),
    Column("customer_id", String(36), nullable=False),
    Column("amount", Integer, nullable=False),
    Column("status", String(255), nullable=False),
    Column("date", Date, nullable=False),
)

revenue = Table(
    "revenue",
    metadata,
    Column("month", String(4), primary_key=True),
    Column("revenue", Integer, nullable=False),
)
