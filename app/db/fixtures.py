# app/db/fixtures.py
"""
Placeholder data for the demo dashboard.

Invoice ids are fixed so that re-seeding updates rows instead of adding new ones.
"""

from datetime import date

from app.models.customers import CustomerRecord
from app.models.invoices import InvoiceRecord
from app.models.revenue import RevenueRecord
from app.models.seed import SeedFixtures
from app.models.users import UserRecord

USERS = [
    UserRecord(
        id="410544b2-4001-4271-9855-fec4b6a6442a",
        name="User",
        email="user@nextmail.com",
        password="123456",
    ),
]

CUSTOMERS = [
    CustomerRecord(
        id="d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        name="Evil Rabbit",
        email="evil@rabbit.com",
        image_url="/customers/evil-rabbit.png",
    ),
    CustomerRecord(
        id="3958dc9e-712f-4377-85e9-fec4b6a6442a",
        name="Delba de Oliveira",
        email="delba@oliveira.com",
        image_url="/customers/delba-de-oliveira.png",
    ),
    CustomerRecord(
        id="3958dc9e-742f-4377-85e9-fec4b6a6442a",
        name="Lee Robinson",
        email="lee@robinson.com",
        image_url="/customers/lee-robinson.png",
    ),
    CustomerRecord(
        id="76d65c26-f784-44a2-ac19-586678f7c2f2",
        name="Michael Novotny",
        email="michael@novotny.com",
        image_url="/customers/michael-novotny.png",
    ),
    CustomerRecord(
        id="cc27c14a-0acf-4f4a-a6c9-d45682c144b9",
        name="Amy Burns",
        email="amy@burns.com",
        image_url="/customers/amy-burns.png",
    ),
    CustomerRecord(
        id="13d07535-c59e-4157-a011-f8d2ef4e0cbb",
        name="Balazs Orban",
        email="balazs@orban.com",
        image_url="/customers/balazs-orban.png",
    ),
]

_EVIL, _DELBA, _LEE, _MICHAEL, _AMY, _BALAZS = (c.id for c in CUSTOMERS)

INVOICES = [
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000001", customer_id=_EVIL,
                  amount=15795, status="pending", date=date(2022, 12, 6)),
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000002", customer_id=_DELBA,
                  amount=20348, status="pending", date=date(2022, 11, 14)),
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000003", customer_id=_AMY,
                  amount=3040, status="paid", date=date(2022, 10, 29)),
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000004", customer_id=_MICHAEL,
                  amount=44800, status="paid", date=date(2023, 9, 10)),
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000005", customer_id=_BALAZS,
                  amount=34577, status="pending", date=date(2023, 8, 5)),
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000006", customer_id=_LEE,
                  amount=54246, status="pending", date=date(2023, 7, 16)),
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000007", customer_id=_EVIL,
                  amount=666, status="pending", date=date(2023, 6, 27)),
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000008", customer_id=_MICHAEL,
                  amount=32545, status="paid", date=date(2023, 6, 9)),
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000009", customer_id=_AMY,
                  amount=1250, status="paid", date=date(2023, 6, 17)),
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000010", customer_id=_BALAZS,
                  amount=8546, status="paid", date=date(2023, 6, 7)),
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000011", customer_id=_DELBA,
                  amount=500, status="paid", date=date(2023, 8, 19)),
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000012", customer_id=_BALAZS,
                  amount=8945, status="paid", date=date(2023, 6, 3)),
    InvoiceRecord(id="5f1d2b4e-0b1a-4c6e-9a51-000000000013", customer_id=_LEE,
                  amount=1000, status="paid", date=date(2022, 6, 5)),
]

REVENUE = [
    RevenueRecord(month="Jan", revenue=2000),
    RevenueRecord(month="Feb", revenue=1800),
    RevenueRecord(month="Mar", revenue=2200),
    RevenueRecord(month="Apr", revenue=2500),
    RevenueRecord(month="May", revenue=2300),
    RevenueRecord(month="Jun", revenue=3200),
    RevenueRecord(month="Jul", revenue=3500),
    RevenueRecord(month="Aug", revenue=3700),
    RevenueRecord(month="Sep", revenue=2500),
    RevenueRecord(month="Oct", revenue=2800),
    RevenueRecord(month="Nov", revenue=3000),
    RevenueRecord(month="Dec", revenue=4800),
]

PLACEHOLDER_FIXTURES = SeedFixtures(
    users=USERS,
    customers=CUSTOMERS,
    invoices=INVOICES,
    revenue=REVENUE,
)
