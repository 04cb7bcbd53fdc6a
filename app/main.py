from fastapi import FastAPI
import logging

from app.api.errors import register_exception_handlers
from app.api.engagements import router as engagements_router
from app.api.health import router as health_router
from app.api.videos import router as videos_router
from core.logging import setup_json_logging
from service.health_service import SERVICE_VERSION

# Setup logging
setup_json_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Video Catalog API", version=SERVICE_VERSION)

register_exception_handlers(app)

# Include routers
app.include_router(health_router)  # Health at root level
app.include_router(videos_router, prefix="/api/v1")
app.include_router(engagements_router, prefix="/api/v1")
