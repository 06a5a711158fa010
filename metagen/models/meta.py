from pydantic import BaseModel


class MetaVariant(BaseModel):
    """One generated meta title/description candidate."""

    title: str  # aim for 50–60 characters
    description: str  # aim for 150–160 characters
