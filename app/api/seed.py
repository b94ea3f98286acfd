# app/api/seed.py

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from app.db.engine import get_engine
from app.db.fixtures import PLACEHOLDER_FIXTURES
from app.db.seeder import UNKNOWN_ERROR, SeedingError, seed_all
from app.models.seed import SeedErrorOut, SeedFixtures, SeedOut

logger = logging.getLogger(__name__)

router = APIRouter(tags=["seed"])


def get_fixtures() -> SeedFixtures:
    return PLACEHOLDER_FIXTURES


@router.get(
    "/seed",
    response_model=SeedOut,
    responses={500: {"model": SeedErrorOut}},
)
def seed_database(
    engine: Engine = Depends(get_engine),
    fixtures: SeedFixtures = Depends(get_fixtures),
):
    """
    Create the dashboard tables if needed and upsert the placeholder rows.

    Safe to call repeatedly. A failure part way through leaves earlier tables seeded.
    """
    try:
        seed_all(engine, fixtures)
    except SeedingError as exc:
        logger.exception("Error seeding database (step: %s)", exc.step)
        return JSONResponse(status_code=500, content=SeedErrorOut(error=exc.message).model_dump())
    except Exception as exc:
        logger.exception("Error seeding database")
        message = str(exc).strip() or UNKNOWN_ERROR
        return JSONResponse(status_code=500, content=SeedErrorOut(error=message).model_dump())

    return SeedOut(message="Database seeded successfully")
