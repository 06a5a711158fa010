"""Prompt construction for AI meta generation."""

import secrets
from typing import List
from urllib.parse import urlparse

from metagen.models.page import PageContent
from metagen.models.signals import InferredSignals

# Characters of body text included in the content summary
PROMPT_EXCERPT_CHARS = 500

META_PROMPT = """# Professional SEO Meta Content Generator

## CONTEXT
URL: {url}
Domain: {domain}
Path: {path}
Primary Keywords: {keywords}
Number of variations needed: {count}
Random seed: {seed}
{content_summary}
## AUDIENCE & INTENT
- The primary audience appears to be {audience}
- The main user intent is likely {intent}
- The content offers unique value through {value}

## GUIDELINES
Meta titles: 50-60 characters, primary keyword near the beginning, specific
about what the page offers, each variation taking a different angle.
Meta descriptions: 150-160 characters, expand on the title, state the problem
the page solves, end with a natural call to action.

## CRITICAL REQUIREMENTS
- ABSOLUTELY NO URLs or domain names in titles
- NO clickbait or false promises
- MUST be specific to the page content

## OUTPUT FORMAT
Return ONLY a JSON array of exactly {count} objects, each with "title" and
"description" string properties. No prose, no markdown.
"""


def _content_summary(page: PageContent) -> str:
    if page.error or not any((page.title, page.heading, page.body_excerpt)):
        return ""
    excerpt = page.body_excerpt[:PROMPT_EXCERPT_CHARS]
    return (
        "\n## WEBSITE CONTENT\n"
        f"Website Title: {page.title}\n"
        f"Main Heading: {page.heading}\n"
        f"Subheadings: {page.subheadings}\n"
        f"Existing Meta Description: {page.meta_description}\n"
        f"Content Excerpt: {excerpt}...\n"
    )


def build_prompt(
    url: str,
    domain: str,
    keywords: List[str],
    count: int,
    page: PageContent,
    signals: InferredSignals,
    force_new: bool = False,
) -> str:
    """Return the generation prompt for one request.

    A random seed is embedded when *force_new* is set so the model is nudged
    away from repeating an earlier answer.
    """
    return META_PROMPT.format(
        url=url,
        domain=domain,
        path=urlparse(url).path or "/",
        keywords=", ".join(keywords),
        count=count,
        seed=secrets.token_hex(4) if force_new else "",
        content_summary=_content_summary(page),
        audience=signals.audience_type,
        intent=signals.user_intent,
        value=signals.value_proposition,
    )
