# app/models/invoices.py

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel

InvoiceStatus = Literal["pending", "paid"]


class InvoiceRecord(BaseModel):
    # None lets the column default assign a fresh id at insert time
    id: Optional[str] = None
    customer_id: str
    amount: int  # cents
    status: InvoiceStatus
    date: date
