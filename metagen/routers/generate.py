import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from metagen.config import Settings, get_settings
from metagen.models.request import GenerationRequest
from metagen.models.response import GenerationResponse
from metagen.services.orchestrator import MetaOrchestrator, build_orchestrator

logger = logging.getLogger(__name__)

MISSING_FIELDS_ERROR = "URL and keywords are required"

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@lru_cache()
def get_orchestrator() -> MetaOrchestrator:
    """Application-wide orchestrator built from the current settings."""
    return build_orchestrator(get_settings())


@router.post(
    "/generate-meta",
    response_model=GenerationResponse,
    summary="Generate SEO meta title/description variants",
    description=(
        "Fetches *url*, analyses its content and returns `variantCount` meta "
        "title/description variants for the given comma-separated `keywords`. "
        "Uses Gemini when an API key is configured and falls back to "
        "content-aware templates otherwise or when the AI call fails."
    ),
)
@limiter.limit("30/minute")
async def generate_meta(
    request: Request,
    body: GenerationRequest,
    orchestrator: MetaOrchestrator = Depends(get_orchestrator),
    settings: Settings = Depends(get_settings),
) -> GenerationResponse:
    """Generate meta variants for *url* and *keywords*."""
    if not (body.url or "").strip() or not body.keyword_list:
        raise HTTPException(status_code=400, detail=MISSING_FIELDS_ERROR)

    logger.info(
        "Generate request received",
        extra={
            "url": body.url,
            "variant_count": body.variant_count,
            "force_new": body.force_new,
        },
    )

    try:
        meta_content, source = await orchestrator.generate_with_source(body)
    except Exception as exc:
        logger.exception("Unexpected error generating meta for %s", body.url)
        raise HTTPException(status_code=500, detail=f"Server error: {exc}")

    logger.info("Generated %d variants for %s via %s", len(meta_content), body.url, source)

    return GenerationResponse(
        meta_content=meta_content,
        url=body.url,
        keywords=body.keywords,
        variant_count=body.variant_count,
        environment=settings.environment,
    )
