# app/models/customers.py

from pydantic import BaseModel


class CustomerRecord(BaseModel):
    id: str
    name: str
    email: str
    image_url: str
