from typing import Optional

from pydantic import BaseModel


class PageContent(BaseModel):
    """Text signals extracted from one fetched page.

    Always present: on fetch or parse failure every text field is empty and
    ``error`` holds the reason.
    """

    url: str
    title: str = ""
    heading: str = ""  # first <h1>
    subheadings: str = ""  # all <h2> texts joined with " | "
    meta_description: str = ""
    body_excerpt: str = ""  # <p> texts joined, truncated
    existing_meta_keywords: str = ""
    error: Optional[str] = None

    @classmethod
    def empty(cls, url: str, error: str) -> "PageContent":
        return cls(url=url, error=error)
