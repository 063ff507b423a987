import logging
import random
from typing import List, Union

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile as StarletteUploadFile

from .catalog import REFERENCE_FEATURES
from .config import AppConfig, config
from .errors import AnalysisError
from .schemas import (
    AnalysisListResponse,
    AnalysisResponse,
    ErrorResponse,
    HealthResponse,
    WebsiteResponse,
)
from .storage import Storage, get_storage
from .utils import is_allowed_image_upload
from .verdict import Catalog, analyze_image

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def build_factor_rng(app_config: AppConfig = config) -> random.Random:
    """Random source for the simulated factors, seeded from FACTOR_SEED when set."""
    return random.Random(app_config.FACTOR_SEED)


_factor_rng = build_factor_rng()

UNSUPPORTED_TYPE_MESSAGE = (
    "File upload only supports image files of type jpeg, jpg, png, or gif"
)


def get_rng() -> random.Random:
    """Dependency to get the random source for simulated analysis factors."""
    return _factor_rng


def get_catalog() -> Catalog:
    """Dependency to get the reference feature catalog."""
    return REFERENCE_FEATURES


@router.get("/health", response_model=HealthResponse)
async def health(storage: Storage = Depends(get_storage)):
    return HealthResponse(status="ok", websites=len(storage.get_all_websites()))


@router.get("/websites", response_model=List[WebsiteResponse])
async def get_websites(storage: Storage = Depends(get_storage)):
    """Get all known websites."""
    try:
        return [WebsiteResponse.model_validate(w) for w in storage.get_all_websites()]
    except Exception as e:
        logger.error(f"Error getting websites: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch websites")


@router.get(
    "/websites/{website_id}",
    response_model=WebsiteResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_website(website_id: int, storage: Storage = Depends(get_storage)):
    """Get a specific website by ID."""
    try:
        website = storage.get_website(website_id)
    except Exception as e:
        logger.error(f"Error getting website {website_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch website")

    if website is None:
        raise HTTPException(status_code=404, detail="Website not found")
    return WebsiteResponse.model_validate(website)


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(
    image: Union[UploadFile, str, None] = File(None),
    storage: Storage = Depends(get_storage),
    rng: random.Random = Depends(get_rng),
    catalog: Catalog = Depends(get_catalog),
):
    """Analyze an uploaded login page screenshot."""
    # A plain form field named image carries no file
    if not isinstance(image, StarletteUploadFile):
        raise HTTPException(status_code=400, detail="No image file provided")

    if not is_allowed_image_upload(
        image.filename, image.content_type, config.ALLOWED_IMAGE_TYPES
    ):
        logger.warning(
            f"Rejected upload {image.filename!r} with content type {image.content_type}"
        )
        raise HTTPException(status_code=400, detail=UNSUPPORTED_TYPE_MESSAGE)

    # Read one byte past the limit to detect oversized uploads
    image_bytes = await image.read(config.MAX_UPLOAD_BYTES + 1)
    if len(image_bytes) > config.MAX_UPLOAD_BYTES:
        logger.warning(f"Rejected upload {image.filename!r}: larger than limit")
        raise HTTPException(
            status_code=400,
            detail=f"File too large, limit is {config.MAX_UPLOAD_BYTES} bytes",
        )

    logger.info(f"Analyzing upload {image.filename!r} ({len(image_bytes)} bytes)")
    try:
        analysis = await run_in_threadpool(
            analyze_image, image_bytes, storage, rng, catalog
        )
    except AnalysisError as e:
        logger.error(f"Analysis error: {e}")
        raise HTTPException(status_code=500, detail="Failed to analyze image")

    return AnalysisResponse.model_validate(analysis)


@router.get("/analyses", response_model=AnalysisListResponse)
async def get_analyses(storage: Storage = Depends(get_storage)):
    """Get all analyses, newest first."""
    analyses = list(reversed(storage.get_all_analyses()))
    return AnalysisListResponse(
        analyses=[AnalysisResponse.model_validate(a) for a in analyses],
        total=len(analyses),
    )


@router.get(
    "/analyses/{analysis_id}",
    response_model=AnalysisResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_analysis(analysis_id: int, storage: Storage = Depends(get_storage)):
    """Get a stored analysis by ID."""
    analysis = storage.get_analysis(analysis_id)
    if analysis is None:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return AnalysisResponse.model_validate(analysis)
