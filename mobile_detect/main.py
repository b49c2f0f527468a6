# mobile_detect/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI
from mobile_detect.config import settings
from mobile_detect.integration import DeviceDetectMiddleware
from mobile_detect.routes import router
from mobile_detect.rules import DEFAULT_RULES
import logging

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""

    logger.info("Starting Mobile Detect API...")
    logger.info(
        f"Loaded {len(DEFAULT_RULES.phone_devices)} phone, {len(DEFAULT_RULES.tablet_devices)} tablet, "
        f"{len(DEFAULT_RULES.operating_systems)} OS and {len(DEFAULT_RULES.browsers)} browser rules"
    )
    if settings.precompile_rules:
        logger.info("Rule precompilation enabled for request detectors")

    yield

    logger.info("Shutting down...")


app = FastAPI(
    title="Mobile Detect API",
    description="Detects mobile and tablet clients from User-Agent and request headers",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(DeviceDetectMiddleware)

# Register routes
app.include_router(router)
