from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Read from the storage dataclasses, serialized with camelCase keys
API_MODEL_CONFIG = ConfigDict(
    from_attributes=True, alias_generator=to_camel, populate_by_name=True
)


class WebsiteResponse(BaseModel):
    """Schema for website response."""

    model_config = API_MODEL_CONFIG

    id: int
    name: str
    domain: str
    logo_url: str
    reference_image_url: str


class AnalysisFactorResponse(BaseModel):
    model_config = API_MODEL_CONFIG

    name: str
    value: Union[str, int]
    is_positive: bool
    is_simulated: bool = False


class KeyDifferenceResponse(BaseModel):
    model_config = API_MODEL_CONFIG

    description: str


class AnalysisResponse(BaseModel):
    """Schema for analysis response."""

    model_config = API_MODEL_CONFIG

    id: int
    uploaded_image_url: str
    identified_website_id: Optional[int] = None
    confidence_score: int
    is_phishing: bool
    analysis_factors: List[AnalysisFactorResponse]
    key_differences: List[KeyDifferenceResponse]
    timestamp: datetime


class AnalysisListResponse(BaseModel):
    """Schema for list of analyses response."""

    analyses: List[AnalysisResponse]
    total: int


class HealthResponse(BaseModel):
    status: str
    websites: int


class ErrorResponse(BaseModel):
    error: str
