from pydantic_settings import BaseSettings
from typing import Optional
import logging


class Settings(BaseSettings):
    app_name: str = "SelfSnap Photobooth"
    app_description: str = "A 2x2 grid photobooth with frames served from object storage"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    aws_region: Optional[str] = None
    ddb_table_name: str = "selfsnap-frames"
    ddb_index_name: str = "GSI1"
    cloudfront_domain: str = "localhost"
    frames_bucket: str = "selfsnap-assets"
    frames_prefix: str = "frames/"

    collage_width: int = 1200
    collage_height: int = 1800
    photo_quality: int = 95
    collages_dir: str = "selfsnap/static/collages"

    class Config:
        env_file = ".env"


settings = Settings()


def configure_logging():
    """Called once by each entry point (the web app and the Lambda handlers)."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
