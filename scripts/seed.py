# scripts/seed.py
"""
Seed the configured database with the placeholder dashboard data.

Usage:
    python -m scripts.seed
"""

import logging
import sys

from app.config import settings
from app.db.engine import get_engine
from app.db.fixtures import PLACEHOLDER_FIXTURES
from app.db.seeder import SeedingError, seed_all

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    try:
        summary = seed_all(get_engine(), PLACEHOLDER_FIXTURES)
    except SeedingError as exc:
        logger.error("Seeding failed at %s: %s", exc.step, exc.message)
        return 1

    logger.info("Users upserted:      %s", summary["users"])
    logger.info("Customers upserted:  %s", summary["customers"])
    logger.info("Invoices upserted:   %s", summary["invoices"])
    logger.info("Revenue upserted:    %s", summary["revenue"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
