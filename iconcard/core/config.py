import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import load_dotenv


load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Covers the outbound icon fetch, static template lookup and the API surface.
    """

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    FETCH_TIMEOUT_SECONDS: float = float(os.getenv("FETCH_TIMEOUT_SECONDS", "10"))
    STATIC_DIR: str = os.getenv("STATIC_DIR", str(PACKAGE_DIR / "static"))

    CORS_ALLOWED_ORIGINS_ENV: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000")

    @classmethod
    def allowed_origins(cls) -> List[str]:
        # Deduplicate while preserving order
        seen = set()
        result: List[str] = []
        for origin in cls.CORS_ALLOWED_ORIGINS_ENV.split(","):
            origin = origin.strip()
            if origin and origin not in seen:
                seen.add(origin)
                result.append(origin)
        return result

    @classmethod
    def validate(cls) -> None:
        if cls.FETCH_TIMEOUT_SECONDS <= 0:
            raise ValueError("FETCH_TIMEOUT_SECONDS must be a positive number")
        if not cls.STATIC_DIR:
            raise ValueError("STATIC_DIR environment variable must not be empty")
