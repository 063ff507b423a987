"""
Phishing verdict for an uploaded screenshot.

The screenshot's feature vector is scored against the reference vector of
every known website. The best score is the confidence that the page is the
genuine one; below PHISHING_THRESHOLD the page is reported as phishing.
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Mapping, Optional, Sequence, Tuple

from .catalog import REFERENCE_FEATURES
from .config import config
from .errors import AnalysisError
from .features import extract_features_from_bytes
from .models import Analysis, AnalysisFactor, KeyDifference, NewAnalysis, Website
from .similarity import calculate_similarity
from .storage import Storage

logger = logging.getLogger(__name__)

PHISHING_THRESHOLD = 70

LOGO_POSITIVE_ABOVE = 75
COLOR_POSITIVE_ABOVE = 70
LOGO_JITTER = 15
COLOR_JITTER = 20

PHISHING_KEY_DIFFERENCES = (
    "Different button colors and shapes",
    "Missing security footer elements",
    "Unusual form field arrangement",
)

Catalog = Mapping[str, Sequence[float]]


@dataclass
class Verdict:
    best_match: Optional[Website]
    highest_similarity: int
    is_phishing: bool
    analysis_factors: List[AnalysisFactor] = field(default_factory=list)
    key_differences: List[KeyDifference] = field(default_factory=list)


def find_best_match(
    features: Sequence[float], websites: Sequence[Website], catalog: Catalog
) -> Tuple[Optional[Website], int]:
    """
    Website whose reference vector is most similar to the features.

    Websites without a reference vector are skipped. Ties keep the earlier
    website. Returns (None, 0) when no website can be scored.
    """
    best_match = None
    highest_similarity = 0

    for website in websites:
        reference = catalog.get(website.domain)
        if reference is None:
            continue

        similarity = calculate_similarity(features, reference)
        if best_match is None or similarity > highest_similarity:
            best_match = website
            highest_similarity = similarity

    return best_match, highest_similarity


def simulated_factors(
    similarity: int, is_phishing: bool, rng: random.Random
) -> List[AnalysisFactor]:
    """
    Display factors derived only from the overall score and verdict.

    None of these inspect the image further: logo and colour scores are the
    overall score with random jitter, layout and URL mirror the verdict.
    """
    logo_similarity = min(100, similarity + rng.randrange(LOGO_JITTER))
    color_similarity = min(100, similarity - rng.randrange(COLOR_JITTER))

    return [
        AnalysisFactor(
            name="Logo matching",
            value=f"{logo_similarity}% similarity",
            is_positive=logo_similarity > LOGO_POSITIVE_ABOVE,
            is_simulated=True,
        ),
        AnalysisFactor(
            name="Color scheme",
            value=f"{color_similarity}% similarity",
            is_positive=color_similarity > COLOR_POSITIVE_ABOVE,
            is_simulated=True,
        ),
        AnalysisFactor(
            name="Layout analysis",
            value="Discrepancies detected" if is_phishing else "Matches reference",
            is_positive=not is_phishing,
            is_simulated=True,
        ),
        AnalysisFactor(
            name="URL pattern",
            value="Unusual pattern" if is_phishing else "Standard pattern",
            is_positive=not is_phishing,
            is_simulated=True,
        ),
    ]


def build_verdict(
    features: Sequence[float],
    websites: Sequence[Website],
    catalog: Catalog,
    rng: random.Random,
) -> Verdict:
    best_match, highest_similarity = find_best_match(features, websites, catalog)
    verdict = Verdict(
        best_match=best_match,
        highest_similarity=highest_similarity,
        is_phishing=highest_similarity < PHISHING_THRESHOLD,
    )

    if best_match is not None:
        verdict.analysis_factors.extend(
            simulated_factors(highest_similarity, verdict.is_phishing, rng)
        )
        if verdict.is_phishing:
            verdict.key_differences.extend(
                KeyDifference(description=d) for d in PHISHING_KEY_DIFFERENCES
            )

    return verdict


def analyze_image(
    image_bytes: bytes,
    storage: Storage,
    rng: random.Random,
    catalog: Catalog = REFERENCE_FEATURES,
) -> Analysis:
    """
    Analyze an uploaded screenshot and store the result.

    Args:
        image_bytes: Raw uploaded file contents
        storage: Store providing the known websites and receiving the result
        rng: Random source for the simulated display factors
        catalog: Reference feature vector per website domain

    Returns:
        The stored analysis record

    Raises:
        AnalysisError: If the image cannot be decoded or scored
    """
    try:
        features = extract_features_from_bytes(image_bytes)
        verdict = build_verdict(features, storage.get_all_websites(), catalog, rng)

        analysis = storage.create_analysis(
            NewAnalysis(
                uploaded_image_url=config.UPLOADED_IMAGE_URL,
                identified_website_id=verdict.best_match.id if verdict.best_match else None,
                confidence_score=verdict.highest_similarity,
                is_phishing=verdict.is_phishing,
                timestamp=datetime.now(timezone.utc),
                analysis_factors=tuple(verdict.analysis_factors),
                key_differences=tuple(verdict.key_differences),
            )
        )
    except Exception as e:
        logger.error(f"Error analyzing image: {e}", exc_info=True)
        raise AnalysisError("Failed to analyze the image") from e

    logger.info(
        f"Analysis {analysis.id}: website={analysis.identified_website_id} "
        f"score={analysis.confidence_score} phishing={analysis.is_phishing}"
    )
    return analysis
