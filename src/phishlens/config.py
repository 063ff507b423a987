import logging
import logging.config
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Paths
PACKAGE_DIR = Path(__file__).resolve().parent


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PHISHLENS_")

    HOST: str = "0.0.0.0"
    API_PORT: int = 8888
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024
    ALLOWED_IMAGE_TYPES: list[str] = Field(
        default_factory=lambda: ["jpeg", "jpg", "png", "gif"]
    )
    # Placeholder, uploads are never stored
    UPLOADED_IMAGE_URL: str = "memory://uploaded-image"
    # Seeds the random source of the simulated analysis factors
    FACTOR_SEED: Optional[int] = None
    LOGGING_CONFIG: Path = PACKAGE_DIR / "logging.conf"
    LOG_FILE: Path = Path("api.log")


config = AppConfig()


def setup_logging(app_config: AppConfig = config):
    """Configures logging from the logging.conf file."""
    logging_config_path = app_config.LOGGING_CONFIG
    if logging_config_path.exists():
        logging.config.fileConfig(logging_config_path, disable_existing_loggers=False)
    else:
        # Fallback logging configuration if file doesn't exist
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
            handlers=[
                logging.StreamHandler(),
                logging.FileHandler(app_config.LOG_FILE),
            ],
        )
        logging.getLogger(__name__).warning(
            f"Logging configuration file not found at {logging_config_path}"
        )
