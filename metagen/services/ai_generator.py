"""Gemini-backed meta generation over the public REST API."""

import json
import logging
import re
from typing import Any, List, Optional

import httpx

from metagen.models.meta import MetaVariant
from metagen.models.page import PageContent
from metagen.models.signals import InferredSignals
from metagen.services.generator import clean_title
from metagen.services.prompt import build_prompt

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
TIMEOUT = 30  # seconds

_FENCED_JSON_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")
_JSON_ARRAY_RE = re.compile(r"\[\s*\{[\s\S]*\}\s*\]")


class AIGenerationError(Exception):
    """The AI path could not produce usable variants."""


def _unwrap_json(text: str) -> str:
    """Return the JSON payload from *text*, which may be wrapped in a code fence."""
    fenced = _FENCED_JSON_RE.search(text)
    if fenced:
        return fenced.group(1)
    array = _JSON_ARRAY_RE.search(text)
    if array:
        return array.group(0)
    return text


def parse_variants(text: str, count: int, domain: str) -> List[MetaVariant]:
    """Parse a model reply into exactly *count* variants.

    Extra items are dropped.  Titles are cleaned of the domain and URLs.

    Raises:
        AIGenerationError: if the reply is not a JSON array of at least
            *count* objects with non-empty ``title`` and ``description``.
            A title that is empty once cleaned counts as missing.
    """
    try:
        data: Any = json.loads(_unwrap_json(text))
    except json.JSONDecodeError as exc:
        raise AIGenerationError(f"Response is not valid JSON: {exc}") from exc

    if not isinstance(data, list) or not data:
        raise AIGenerationError("Response is not a non-empty JSON array.")

    variants: List[MetaVariant] = []
    for item in data:
        if not isinstance(item, dict):
            raise AIGenerationError("Invalid item format.")
        title = item.get("title")
        description = item.get("description")
        if not isinstance(title, str) or not isinstance(description, str):
            raise AIGenerationError("Invalid item format.")
        title = clean_title(title, domain)
        if not title or not description.strip():
            raise AIGenerationError("Invalid item format.")
        variants.append(MetaVariant(title=title, description=description.strip()))

    if len(variants) < count:
        raise AIGenerationError(f"Expected {count} variants, got {len(variants)}.")
    return variants[:count]


def _response_text(payload: Any) -> str:
    """Concatenate the text parts of the first candidate in a generateContent reply."""
    try:
        parts = payload["candidates"][0]["content"]["parts"]
        return "".join(part.get("text", "") for part in parts)
    except (KeyError, IndexError, TypeError) as exc:
        raise AIGenerationError("Unexpected response structure from Gemini.") from exc


class GeminiGenerator:
    """Generates meta variants with Google Gemini.

    Pass *client* to reuse an existing :class:`httpx.AsyncClient`; otherwise a
    short-lived client is opened per call.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def complete(self, prompt: str) -> str:
        """Send *prompt* to Gemini and return the reply text.

        Raises:
            httpx.HTTPError: on network or HTTP errors.
            AIGenerationError: if the reply has no text.
        """
        body = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        headers = {"x-goog-api-key": self.api_key}

        if self._client is not None:
            response = await self._client.post(
                self.endpoint, json=body, headers=headers, timeout=self.timeout
            )
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.endpoint, json=body, headers=headers)
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError as exc:
            raise AIGenerationError("Gemini returned a non-JSON body.") from exc

        text = _response_text(payload)
        if not text.strip():
            raise AIGenerationError("Gemini returned an empty reply.")
        return text

    async def generate(
        self,
        url: str,
        domain: str,
        keywords: List[str],
        count: int,
        page: PageContent,
        signals: InferredSignals,
        force_new: bool = False,
    ) -> List[MetaVariant]:
        prompt = build_prompt(url, domain, keywords, count, page, signals, force_new)
        logger.info(
            "Requesting meta variants from Gemini",
            extra={"model": self.model, "variant_count": count},
        )
        text = await self.complete(prompt)
        return parse_variants(text, count, domain)
