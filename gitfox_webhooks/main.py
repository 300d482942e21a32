import structlog
from fastapi import FastAPI

from gitfox_webhooks.core.config import config
from gitfox_webhooks.core.utils import configure_logging
from gitfox_webhooks.webhooks.router import router as webhook_router

# --- Application Setup ---

configure_logging(config.logging)
logger = structlog.get_logger(__name__)

for problem in config.validate():
    logger.warning("config_problem", problem=problem)

app = FastAPI(
    title="Gitfox Webhooks",
    description="Verified, typed Gitfox webhook deliveries.",
    version="0.1.0",
)

# --- Include Routers ---

app.include_router(webhook_router, prefix="/webhooks", tags=["Gitfox Webhooks"])

# --- Root Endpoint ---


@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the service is running."""
    return {"status": "ok", "message": "Gitfox webhook receiver is running."}
