"""Generation orchestration: AI first when configured, templates otherwise."""

import logging
import random
from typing import Awaitable, Callable, List, Literal, Optional, Tuple

from metagen.config import Settings
from metagen.models.meta import MetaVariant
from metagen.models.page import PageContent
from metagen.models.request import GenerationRequest
from metagen.services.ai_generator import AIGenerationError, GeminiGenerator
from metagen.services.fetcher import fetch_page
from metagen.services.generator import generate_variants, resolve_topic
from metagen.services.inferencer import infer_signals
from metagen.services.normalizer import extract_domain, normalize_url

logger = logging.getLogger(__name__)

Source = Literal["ai", "fallback"]

PageFetcher = Callable[[str], Awaitable[PageContent]]


class MetaOrchestrator:
    """Runs one generation request end to end.

    The page is always fetched first, since both paths need its signals.
    With an *ai_generator* the AI path is attempted and any failure there
    falls back to template generation; without one only templates are used.
    """

    def __init__(
        self,
        ai_generator: Optional[GeminiGenerator] = None,
        rng: Optional[random.Random] = None,
        fetcher: PageFetcher = fetch_page,
    ) -> None:
        self.ai_generator = ai_generator
        self.rng = rng or random.Random()
        self.fetcher = fetcher

    @property
    def ai_enabled(self) -> bool:
        return self.ai_generator is not None

    async def generate(self, request: GenerationRequest) -> List[MetaVariant]:
        variants, _source = await self.generate_with_source(request)
        return variants

    async def generate_with_source(
        self, request: GenerationRequest
    ) -> Tuple[List[MetaVariant], Source]:
        """Generate variants and report which path produced them."""
        url = normalize_url(request.url or "")
        keywords = request.keyword_list
        count = request.variant_count

        page = await self.fetcher(url)
        if page.error:
            logger.info("Continuing without page content for %s: %s", url, page.error)

        domain = extract_domain(url)
        signals = infer_signals(page.body_excerpt)

        # ── AI attempt ────────────────────────────────────────────────────────
        if self.ai_generator is not None:
            try:
                variants = await self.ai_generator.generate(
                    url, domain, keywords, count, page, signals, request.force_new
                )
                return variants, "ai"
            except AIGenerationError as exc:
                logger.warning("AI response rejected for %s, using fallback: %s", url, exc)
            except Exception as exc:
                logger.warning("AI generation failed for %s, using fallback: %s", url, exc)
        else:
            logger.info("AI generation not configured, using fallback for %s", url)

        # ── Fallback ──────────────────────────────────────────────────────────
        topic = resolve_topic(page, url, keywords)
        variants = generate_variants(
            keywords,
            topic,
            domain,
            count,
            force_new=request.force_new,
            rng=self.rng,
            signals=signals,
        )
        return variants, "fallback"


def build_orchestrator(settings: Settings) -> MetaOrchestrator:
    """Create the orchestrator described by *settings*."""
    ai_generator = None
    if settings.ai_enabled:
        ai_generator = GeminiGenerator(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.ai_timeout_seconds,
        )

    timeout = settings.fetch_timeout_seconds

    async def fetcher(url: str) -> PageContent:
        return await fetch_page(url, timeout=timeout)

    return MetaOrchestrator(ai_generator=ai_generator, fetcher=fetcher)
