import logging
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    reference_tables_path: Optional[Path] = None
    default_years_to_calculate: int = 50
    default_points: int = 1000
    default_efficiency_degradation: float = 0.005
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "CO2CALC_"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings (call once at process start)."""
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())
