import math
from typing import Sequence

from .errors import FeatureLengthMismatchError

MAX_CHANNEL_VALUE = 255


def euclidean_distance(features_a: Sequence[float], features_b: Sequence[float]) -> float:
    if len(features_a) != len(features_b):
        raise FeatureLengthMismatchError(
            f"Feature vectors must have the same length "
            f"({len(features_a)} != {len(features_b)})"
        )
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(features_a, features_b)))


def calculate_similarity(features_a: Sequence[float], features_b: Sequence[float]) -> int:
    """
    Similarity score in [0, 100] of two feature vectors.

    The Euclidean distance is normalized by the largest distance possible
    when every component lies in [0, 255]. Values are compared raw, so the
    colour averages outweigh the [0, 1] whole-image statistics.

    Raises:
        FeatureLengthMismatchError: If the vectors differ in length
        ValueError: If the vectors are empty
    """
    distance = euclidean_distance(features_a, features_b)
    if not features_a:
        raise ValueError("Cannot compare empty feature vectors")

    max_distance = math.sqrt(len(features_a) * MAX_CHANNEL_VALUE**2)
    similarity = 100 - (distance / max_distance) * 100

    # Round half up
    return max(0, min(100, math.floor(similarity + 0.5)))
