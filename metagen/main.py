import logging
import logging.config

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from metagen.config import get_settings
from metagen.routers.generate import MISSING_FIELDS_ERROR, limiter, router as generate_router
from metagen.routers.health import router as health_router

settings = get_settings()

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": settings.log_level.upper(), "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)

_REQUIRED_FIELD_LOCS = {("body",), ("body", "url"), ("body", "keywords")}

app = FastAPI(
    title="Metagen – SEO Meta Generator API",
    description="Fetches a URL, analyses its content and returns SEO meta title/description variants.",
    version="1.0.0",
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    # Missing body or unusable url/keywords get the canonical message
    if any(tuple(err.get("loc", ())) in _REQUIRED_FIELD_LOCS for err in errors):
        return JSONResponse(status_code=400, content={"error": MISSING_FIELDS_ERROR})
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ())[1:])}: {err.get('msg', '')}"
        for err in errors
    )
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {message}"})


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"error": f"Server error: {exc}"})


app.include_router(health_router)
app.include_router(generate_router)

logger.info(
    "Server configured",
    extra={"environment": settings.environment, "ai_configured": settings.ai_enabled},
)


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port)
