# app/models/seed.py

from typing import Dict, List

from pydantic import BaseModel, Field

from app.models.customers import CustomerRecord
from app.models.invoices import InvoiceRecord
from app.models.revenue import RevenueRecord
from app.models.users import UserRecord


class SeedFixtures(BaseModel):
    users: List[UserRecord] = Field(default_factory=list)
    customers: List[CustomerRecord] = Field(default_factory=list)
    invoices: List[InvoiceRecord] = Field(default_factory=list)
    revenue: List[RevenueRecord] = Field(default_factory=list)


# table name -> rows upserted
SeedSummary = Dict[str, int]


class SeedOut(BaseModel):
    message: str


class SeedErrorOut(BaseModel):
    error: str
