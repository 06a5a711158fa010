"""URL and keyword normalisation utilities: scheme handling, domain, path topic."""

import re
from typing import List
from urllib.parse import urlparse


def normalize_url(url: str) -> str:
    """Return *url* with ``https://`` prefixed when no http(s) scheme is present."""
    url = url.strip()
    if not url.lower().startswith(("http://", "https://")):
        url = f"https://{url}"
    return url


def extract_domain(url: str) -> str:
    """Return the lowercased hostname of *url* without a leading ``www.``.

    ``example.com/page`` and ``https://www.example.com/page`` both give
    ``example.com``.
    """
    hostname = urlparse(normalize_url(url)).hostname or ""
    if hostname.startswith("www."):
        hostname = hostname[len("www."):]
    return hostname


def topic_from_path(url: str) -> str:
    """Derive a human-readable topic from the last non-empty URL path segment.

    Hyphens become spaces and every word is capitalised, so
    ``/blog/cold-brew-tips`` gives ``Cold Brew Tips``.  Returns ``""`` when the
    path is empty.
    """
    path = urlparse(normalize_url(url)).path
    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        return ""
    topic = segments[-1].replace("-", " ")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), topic)


def parse_keywords(raw: str) -> List[str]:
    """Split a comma-separated keyword string into trimmed, non-empty terms.

    Order is preserved and duplicates are kept.
    """
    return [term.strip() for term in raw.split(",") if term.strip()]
