import re
from typing import Dict

from bs4 import BeautifulSoup

# Character budget for the concatenated paragraph text
MAX_EXCERPT_CHARS = 3000

SUBHEADING_SEPARATOR = " | "

_WHITESPACE_RE = re.compile(r"\s+")


def _text(node) -> str:
    """Return the whitespace-collapsed text of *node*, or "" when absent."""
    if node is None:
        return ""
    return _WHITESPACE_RE.sub(" ", node.get_text(" ")).strip()


def _meta_content(soup: BeautifulSoup, name: str) -> str:
    meta = soup.find("meta", attrs={"name": re.compile(f"^{name}$", re.IGNORECASE)})
    if meta and meta.get("content"):
        return _WHITESPACE_RE.sub(" ", str(meta["content"])).strip()
    return ""


def _extract_subheadings(soup: BeautifulSoup) -> str:
    texts = (_text(h2) for h2 in soup.find_all("h2"))
    return SUBHEADING_SEPARATOR.join(text for text in texts if text)


def _extract_body_excerpt(soup: BeautifulSoup) -> str:
    texts = (_text(p) for p in soup.find_all("p"))
    body = " ".join(text for text in texts if text)
    return body[:MAX_EXCERPT_CHARS].strip()


def extract(html: str) -> Dict[str, str]:
    """Extract the SEO-relevant text signals from *html*.

    Every lookup is best-effort: a missing element yields ``""``.

    Returns:
        A dict with ``title``, ``heading``, ``subheadings``,
        ``meta_description``, ``body_excerpt`` and ``existing_meta_keywords``.
    """
    soup = BeautifulSoup(html, "lxml")

    return {
        "title": _text(soup.find("title")),
        "heading": _text(soup.find("h1")),
        "subheadings": _extract_subheadings(soup),
        "meta_description": _meta_content(soup, "description"),
        "body_excerpt": _extract_body_excerpt(soup),
        "existing_meta_keywords": _meta_content(soup, "keywords"),
    }
