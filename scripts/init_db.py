import logging

from app.config import settings
from app.db.engine import get_engine
from app.db.seeder import ensure_schema

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    engine = get_engine()
    ensure_schema(engine)
    logger.info("DB schema ensured on %s", engine.url.render_as_string(hide_password=True))

if __name__ == "__main__":
    main()
