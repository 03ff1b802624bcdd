"""FastAPI application entrypoint for the Kiosk Portal."""

import logging

from fastapi import FastAPI

from kiosk_portal.api.kiosk import router as kiosk_router
from kiosk_portal.core.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Kiosk Portal")

app.include_router(kiosk_router)


@app.get("/health")
def health() -> dict[str, bool]:
    """Basic liveness probe endpoint."""
    return {"ok": True}
