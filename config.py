"""
Configuration for the evacuation planning backend.
Values come from the environment (prefix ``EVAC_``) or a local ``.env`` file.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EVAC_", env_file=".env", extra="ignore")

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # comma separated; "*" allows any origin
    ALLOWED_ORIGINS: str = "*"

    # "memory" keeps everything in process; "json" persists under DATA_DIR
    STORAGE: Literal["memory", "json"] = "memory"
    DATA_DIR: Path = Field(default=BASE_DIR / "data")

    # zones.json / vehicles.json loaded at startup; None disables seeding
    SEED_DIR: Optional[Path] = Field(default=BASE_DIR / "database")

    @property
    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
