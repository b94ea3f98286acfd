import logging

from fastapi import FastAPI

from app.api.seed import router as seed_router
from app.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
)

@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(seed_router)
