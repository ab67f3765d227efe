"""
properdata API
Read-only HTTP lookups over the configured `.proper` file.
Run: uvicorn properdata.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.deps import close_properties_file
from .api.helpers import status_for
from .api.routes import health_router, properties_router
from .config import get_settings
from .errors import PropertiesError

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    close_properties_file()


app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)


@app.exception_handler(PropertiesError)
async def properties_error_handler(request: Request, exc: PropertiesError):
    status = status_for(exc)
    if status >= 500:
        logger.error("Lookup failed on %s: %s", request.url.path, exc.message)
    return JSONResponse({"detail": exc.message, "code": exc.code}, status_code=status)


app.include_router(health_router)
app.include_router(properties_router)
