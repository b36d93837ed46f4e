import logging
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


@dataclass(frozen=True)
class Settings:
    app_name: str = "User Records API"
    user_store_variant: str = "dto"
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (and .env, if present)"""
        origins = list(DEFAULT_CORS_ORIGINS)
        extra = os.getenv("CORS_ORIGINS", "")
        if extra:
            origins.extend(o.strip() for o in extra.split(",") if o.strip())

        return cls(
            app_name=os.getenv("APP_NAME", cls.app_name),
            user_store_variant=os.getenv("USER_STORE_VARIANT", cls.user_store_variant).strip().lower(),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            cors_origins=origins,
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
