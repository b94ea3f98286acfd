from sqlalchemy import inspect, text

from app.db.fixtures import PLACEHOLDER_FIXTURES
from app.db.schema import customers, invoices, revenue, users
from scripts import init_db
from scripts import seed as seed_script

from conftest import count_rows


def test_init_db_creates_tables(engine, monkeypatch):
    monkeypatch.setattr(init_db, "get_engine", lambda: engine)

    init_db.main()

    assert {"users", "customers", "invoices", "revenue"} <= set(inspect(engine).get_table_names())
    assert count_rows(engine, users) == 0


def test_seed_script_seeds_placeholder_data(engine, monkeypatch):
    monkeypatch.setattr(seed_script, "get_engine", lambda: engine)

    assert seed_script.main() == 0

    assert count_rows(engine, users) == len(PLACEHOLDER_FIXTURES.users)
    assert count_rows(engine, customers) == len(PLACEHOLDER_FIXTURES.customers)
    assert count_rows(engine, invoices) == len(PLACEHOLDER_FIXTURES.invoices)
    assert count_rows(engine, revenue) == len(PLACEHOLDER_FIXTURES.revenue)


def test_seed_script_exits_non_zero_on_failure(engine, monkeypatch):
    monkeypatch.setattr(seed_script, "get_engine", lambda: engine)
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE revenue (month VARCHAR(4) PRIMARY KEY)"))

    assert seed_script.main() == 1
    assert count_rows(engine, invoices) == len(PLACEHOLDER_FIXTURES.invoices)
