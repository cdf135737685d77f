from fastapi import FastAPI

from checkgate import __version__
from checkgate.api.checklists import router as checklists_api_router
from checkgate.api.errors import configuration_error_handler
from checkgate.api.rules import router as rules_api_router
from checkgate.core.config import config
from checkgate.core.errors import ConfigurationError
from checkgate.core.utils.logging import configure_logging

# --- Application Setup ---

configure_logging(config.logging, level=config.log_level)

app = FastAPI(
    title="checkgate",
    description="Rule-based compliance gate for code changes.",
    version=__version__,
)

app.add_exception_handler(ConfigurationError, configuration_error_handler)

# --- Include Routers ---

app.include_router(rules_api_router, prefix="/api/v1", tags=["Evaluation"])
app.include_router(checklists_api_router, prefix="/api/v1")

# --- Root Endpoint ---


@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the service is running."""
    return {"status": "ok", "message": "checkgate is running."}
