"""Template-based meta generation used when the AI path is unavailable."""

import datetime
import random
import re
from typing import List, Optional, Sequence

from metagen.models.meta import MetaVariant
from metagen.models.page import PageContent
from metagen.models.signals import InferredSignals
from metagen.services.normalizer import topic_from_path
from metagen.services.templates import (
    BENEFIT_PHRASES,
    DEFAULT_BENEFIT,
    DESCRIPTION_TEMPLATES,
    TITLE_TEMPLATES,
)

_URL_RE = re.compile(r"https?://\S*", re.IGNORECASE)
_WWW_RE = re.compile(r"www\.\S*", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
_TRAILING_SEPARATORS_RE = re.compile(r"[\s\-|]+$")


def resolve_topic(page: PageContent, url: str, keywords: Sequence[str]) -> str:
    """Pick the topic for a page: heading, title, URL path, then first keyword."""
    return (
        page.heading
        or page.title
        or topic_from_path(url)
        or (keywords[0] if keywords else "")
    )


def _strip_links(text: str) -> str:
    return _WWW_RE.sub("", _URL_RE.sub("", text))


def clean_title(title: str, domain: str) -> str:
    """Strip the site domain, URLs and ``www.`` tokens from *title*.

    Links are removed before the bare domain so that ``https://example.com``
    and ``www.example.com`` go as whole tokens.  Whitespace is collapsed and
    trailing separators (``-``, ``|``, spaces) are removed afterwards.
    """
    title = _strip_links(title)
    if domain:
        title = re.sub(re.escape(domain), "", title, flags=re.IGNORECASE)
        # removing the domain can join fragments back into a link
        title = _strip_links(title)
    title = _WHITESPACE_RE.sub(" ", title).strip()
    return _TRAILING_SEPARATORS_RE.sub("", title)


def generate_variants(
    keywords: Sequence[str],
    topic: str,
    domain: str,
    count: int,
    force_new: bool = False,
    rng: Optional[random.Random] = None,
    signals: Optional[InferredSignals] = None,
) -> List[MetaVariant]:
    """Fill title/description templates to produce *count* variants.

    Variant ``i`` uses ``keywords[i % len(keywords)]`` and the templates at
    ``(i + offset) % len(templates)``.  The offsets are zero unless
    *force_new* is set, in which case one title offset and one description
    offset are drawn from *rng* for the whole call.
    """
    if force_new:
        rng = rng or random.Random()
        title_offset = rng.randrange(len(TITLE_TEMPLATES))
        desc_offset = rng.randrange(len(DESCRIPTION_TEMPLATES))
    else:
        title_offset = desc_offset = 0

    benefit = DEFAULT_BENEFIT
    if signals is not None:
        benefit = BENEFIT_PHRASES.get(signals.value_proposition, DEFAULT_BENEFIT)

    year = datetime.date.today().year
    keywords = list(keywords) or [topic]

    variants: List[MetaVariant] = []
    for i in range(count):
        fields = {
            "keyword": keywords[i % len(keywords)],
            "topic": topic,
            "domain": domain,
            "year": year,
            "benefit": benefit,
        }
        title = TITLE_TEMPLATES[(i + title_offset) % len(TITLE_TEMPLATES)].format(**fields)
        description = DESCRIPTION_TEMPLATES[(i + desc_offset) % len(DESCRIPTION_TEMPLATES)].format(
            **fields
        )
        variants.append(MetaVariant(title=clean_title(title, domain), description=description))

    return variants
