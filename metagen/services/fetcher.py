import asyncio
import ipaddress
import logging
import socket
from urllib.parse import urljoin, urlparse

import httpx

from metagen.models.page import PageContent
from metagen.services.extractor import extract
from metagen.services.normalizer import normalize_url

logger = logging.getLogger(__name__)

MAX_CONTENT_SIZE = 10 * 1024 * 1024  # 10 MB
TIMEOUT = 10  # seconds
MAX_REDIRECTS = 5
ALLOWED_SCHEMES = {"http", "https"}

# Headers of a desktop Chrome browser; plenty of sites refuse bare clients.
BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Upgrade-Insecure-Requests": "1",
    "Cache-Control": "max-age=0",
}


def _is_private_address(hostname: str) -> bool:
    """Return True if *hostname* resolves to a private, loopback, or link-local address."""
    try:
        infos = socket.getaddrinfo(hostname, None)
    except socket.gaierror:
        return False

    for info in infos:
        raw_ip = info[4][0]
        # Strip IPv6 zone IDs (e.g. "::1%eth0" → "::1")
        raw_ip = raw_ip.split("%")[0]
        try:
            addr = ipaddress.ip_address(raw_ip)
        except ValueError:
            continue
        if addr.is_private or addr.is_loopback or addr.is_link_local or addr.is_reserved:
            return True
    return False


async def _validate_url(url: str) -> None:
    """Raise ValueError if *url* fails SSRF / scheme validation.

    The DNS lookup runs in a worker thread so the event loop is not blocked.
    """
    parsed = urlparse(url)

    if parsed.scheme not in ALLOWED_SCHEMES:
        raise ValueError(f"Scheme '{parsed.scheme}' is not allowed. Use http or https.")

    hostname = parsed.hostname
    if not hostname:
        raise ValueError("URL must have a valid hostname.")

    if await asyncio.to_thread(_is_private_address, hostname):
        raise ValueError("Requests to private/internal addresses are not allowed.")


async def fetch_html(url: str, timeout: float = TIMEOUT) -> str:
    """Fetch *url* and return the response body as a string.

    Redirects are followed manually (at most ``MAX_REDIRECTS``) so that every
    redirect destination is validated against the SSRF rules before the next
    request is made.

    Raises:
        ValueError: if the URL fails SSRF / scheme validation.
        httpx.HTTPError: on network or HTTP errors.
        RuntimeError: on too many redirects or a body over MAX_CONTENT_SIZE.
    """
    await _validate_url(url)

    current_url = url
    async with httpx.AsyncClient(
        follow_redirects=False, timeout=timeout, headers=BROWSER_HEADERS
    ) as client:
        for _ in range(MAX_REDIRECTS + 1):
            async with client.stream("GET", current_url) as response:
                if response.is_redirect:
                    location = response.headers.get("location", "")
                    next_url = urljoin(current_url, location)
                    await _validate_url(next_url)
                    current_url = next_url
                    continue

                response.raise_for_status()

                content_length = response.headers.get("content-length")
                if content_length and int(content_length) > MAX_CONTENT_SIZE:
                    raise RuntimeError("Response body exceeds the maximum allowed size.")

                chunks = []
                total = 0
                async for chunk in response.aiter_bytes():
                    total += len(chunk)
                    if total > MAX_CONTENT_SIZE:
                        raise RuntimeError("Response body exceeds the maximum allowed size.")
                    chunks.append(chunk)

                return b"".join(chunks).decode(errors="replace")

    raise RuntimeError("Too many redirects.")


async def fetch_page(url: str, timeout: float = TIMEOUT) -> PageContent:
    """Fetch *url* and extract its text signals.

    Never raises: any fetch failure is returned as an empty
    :class:`PageContent` whose ``error`` holds the reason.
    """
    url = normalize_url(url)
    try:
        html = await fetch_html(url, timeout=timeout)
    except httpx.TimeoutException:
        logger.warning("Timeout fetching URL: %s", url)
        return PageContent.empty(url, "The target URL timed out.")
    except httpx.HTTPStatusError as exc:
        logger.warning("HTTP error fetching URL %s: %s", url, exc)
        return PageContent.empty(url, f"Target URL returned HTTP {exc.response.status_code}.")
    except (ValueError, httpx.HTTPError, RuntimeError) as exc:
        logger.warning("Error fetching URL %s: %s", url, exc)
        return PageContent.empty(url, str(exc) or exc.__class__.__name__)

    try:
        fields = extract(html)
    except Exception as exc:
        logger.warning("Failed to parse HTML from %s: %s", url, exc)
        return PageContent.empty(url, f"Failed to parse page: {exc}")

    return PageContent(url=url, **fields)
