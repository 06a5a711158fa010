from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from metagen.models.meta import MetaVariant


class GenerationResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    meta_content: List[MetaVariant]
    url: str
    keywords: str
    variant_count: int
    environment: str


class HealthResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str
    message: str
    environment: str
    api_configured: bool
