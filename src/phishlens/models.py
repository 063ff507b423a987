# In-memory records
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class NewWebsite:
    """Website data before an id is assigned."""

    name: str
    domain: str
    logo_url: str
    reference_image_url: str


@dataclass(frozen=True)
class Website:
    """Reference data for a legitimate website."""

    id: int
    name: str
    domain: str
    logo_url: str
    reference_image_url: str


@dataclass(frozen=True)
class AnalysisFactor:
    name: str
    value: Union[str, int]
    is_positive: bool
    # True when the value is made up for display, not measured on the image
    is_simulated: bool = False


@dataclass(frozen=True)
class KeyDifference:
    description: str


@dataclass(frozen=True)
class NewAnalysis:
    """Analysis result before an id is assigned."""

    uploaded_image_url: str
    identified_website_id: Optional[int]
    confidence_score: int
    is_phishing: bool
    timestamp: datetime
    analysis_factors: Tuple[AnalysisFactor, ...] = field(default_factory=tuple)
    key_differences: Tuple[KeyDifference, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Analysis:
    """Stored result of one analyzed screenshot."""

    id: int
    uploaded_image_url: str
    identified_website_id: Optional[int]
    confidence_score: int
    is_phishing: bool
    timestamp: datetime
    analysis_factors: Tuple[AnalysisFactor, ...] = field(default_factory=tuple)
    key_differences: Tuple[KeyDifference, ...] = field(default_factory=tuple)
