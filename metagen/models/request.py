from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from metagen.services.normalizer import parse_keywords


class GenerationRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    url: Optional[str] = None
    keywords: Optional[str] = None
    variant_count: int = Field(
        default=1,
        ge=1,
        description="Number of title/description variants to return.",
    )
    force_new: bool = False
    """Regeneration flag.

    When true, template selection is perturbed so a repeated request is likely
    to surface different variants. Validation is unaffected.
    """

    @property
    def keyword_list(self) -> List[str]:
        """Comma-separated keywords, trimmed, empties dropped, order kept."""
        return parse_keywords(self.keywords or "")
