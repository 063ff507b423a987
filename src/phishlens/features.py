"""
Pixel statistics of a login page screenshot.

The screenshot is stretched onto a fixed 224x224 RGBA canvas and reduced to a
12-element feature vector: the average colour of three horizontal bands
(header, form, footer) followed by three whole-image statistics.
"""

import logging
from typing import List, Tuple

import numpy as np
from PIL import Image

from .errors import RegionOutOfBoundsError
from .utils import decode_image_bytes

logger = logging.getLogger(__name__)

CANVAS_SIZE = 224

# (y, height) of the top, middle and bottom bands, each spanning the full width
BANDS = ((0, 75), (75, 75), (150, 74))

COLOR_QUANTUM = 10
COLOR_VARIETY_NORM = 2000
EDGE_THRESHOLD = 30
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])

FEATURE_NAMES = (
    "topR",
    "topG",
    "topB",
    "midR",
    "midG",
    "midB",
    "botR",
    "botG",
    "botB",
    "colorVariety",
    "edgeRatio",
    "brightness",
)

FeatureVector = List[float]


def region_stats(
    pixels: np.ndarray, x: int, y: int, width: int, height: int
) -> Tuple[float, float, float]:
    """
    Average R, G and B over a rectangle of the image. Alpha is ignored.

    Args:
        pixels: (height, width, 4) uint8 RGBA array
        x, y: Top-left corner of the rectangle
        width, height: Size of the rectangle

    Returns:
        Tuple of mean red, green and blue values

    Raises:
        RegionOutOfBoundsError: If the rectangle is empty or leaves the image
    """
    img_height, img_width = pixels.shape[:2]
    if (
        width <= 0
        or height <= 0
        or x < 0
        or y < 0
        or x + width > img_width
        or y + height > img_height
    ):
        raise RegionOutOfBoundsError(
            f"Region (x={x}, y={y}, width={width}, height={height}) "
            f"is outside image of size {img_width}x{img_height}"
        )

    region = pixels[y : y + height, x : x + width, :3].astype(np.float64)
    r, g, b = region.reshape(-1, 3).mean(axis=0)
    return float(r), float(g), float(b)


def color_variety(pixels: np.ndarray) -> float:
    """Distinct colours after rounding each channel down to a multiple of 10, over 2000."""
    quantized = (pixels[..., :3] // COLOR_QUANTUM) * COLOR_QUANTUM
    distinct = np.unique(quantized.reshape(-1, 3), axis=0)
    return len(distinct) / COLOR_VARIETY_NORM


def edge_ratio(pixels: np.ndarray) -> float:
    """
    Share of pixels on a horizontal red-channel edge.

    Only interior pixels are tested but the count is divided by the full
    image area, border included.
    """
    height, width = pixels.shape[:2]
    if height < 3 or width < 3:
        return 0.0

    red = pixels[..., 0].astype(np.int32)
    center = red[1:-1, 1:-1]
    left = red[1:-1, :-2]
    right = red[1:-1, 2:]
    red_diff = np.abs(center - left) + np.abs(center - right)

    edges = int(np.count_nonzero(red_diff > EDGE_THRESHOLD))
    return edges / (width * height)


def brightness(pixels: np.ndarray) -> float:
    """Mean luminance normalized to [0, 1]."""
    height, width = pixels.shape[:2]
    luma = pixels[..., :3].astype(np.float64) @ LUMA_WEIGHTS
    return float(luma.sum()) / (width * height * 255)


def prepare_canvas(image: Image.Image) -> np.ndarray:
    """
    Stretch an image onto the 224x224 canvas, ignoring its aspect ratio.

    Resampling always runs on premultiplied alpha, so fully transparent
    pixels read back as RGB 0 whatever the source size.
    """
    canvas = (
        image.convert("RGBA")
        .convert("RGBa")
        .resize((CANVAS_SIZE, CANVAS_SIZE), resample=Image.Resampling.BILINEAR)
        .convert("RGBA")
    )
    return np.asarray(canvas, dtype=np.uint8)


def extract_features(pixels: np.ndarray) -> FeatureVector:
    """
    Build the 12-element feature vector of a prepared canvas.

    Order: top, middle and bottom band averages (R, G, B each), then colour
    variety, edge ratio and brightness. See FEATURE_NAMES.
    """
    if pixels.shape[:2] != (CANVAS_SIZE, CANVAS_SIZE):
        raise ValueError(
            f"Expected a {CANVAS_SIZE}x{CANVAS_SIZE} canvas, got shape {pixels.shape}"
        )

    features: FeatureVector = []
    for y, height in BANDS:
        features.extend(region_stats(pixels, 0, y, CANVAS_SIZE, height))

    features.append(color_variety(pixels))
    features.append(edge_ratio(pixels))
    features.append(brightness(pixels))
    return features


def extract_features_from_bytes(image_bytes: bytes) -> FeatureVector:
    image = decode_image_bytes(image_bytes)
    logger.debug(f"Decoded {image.format} image {image.size} mode {image.mode}")
    return extract_features(prepare_canvas(image))
