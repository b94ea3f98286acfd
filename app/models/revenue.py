# app/models/revenue.py

from pydantic import BaseModel, Field


class RevenueRecord(BaseModel):
    month: str = Field(..., min_length=3, max_length=4, description="Short month label, e.g. 'Jan'")
    revenue: int
