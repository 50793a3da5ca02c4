# backend-services/catalog-service/config.py
"""
Environment-driven configuration for the catalog-service.

Values are read on each call rather than at import time so tests and
deployments can override them through the environment.
"""
import os
from typing import List, Optional

DEFAULT_MOVIE_IDS = "1234,5678"


def parse_csv(raw: Optional[str]) -> List[str]:
    """Splits a comma-separated value into stripped, non-empty entries, preserving order."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def parse_movie_ids(raw: Optional[str]) -> List[str]:
    return parse_csv(raw)


def get_movie_ids() -> List[str]:
    """
    The ordered movie identifiers every catalog is built from.

    A blank CATALOG_MOVIE_IDS falls back to the default list.
    """
    return parse_movie_ids(os.getenv("CATALOG_MOVIE_IDS")) or parse_movie_ids(DEFAULT_MOVIE_IDS)


def get_movie_info_url() -> str:
    return os.getenv("MOVIE_INFO_SERVICE_URL", "http://movie-info").rstrip("/")


def get_ratings_data_url() -> str:
    return os.getenv("RATINGS_DATA_SERVICE_URL", "http://ratings-data").rstrip("/")


def get_downstream_timeout() -> Optional[float]:
    """Client timeout for collaborator calls; None (block until answered) when unset."""
    raw = os.getenv("DOWNSTREAM_HTTP_TIMEOUT_SECONDS", "").strip()
    if not raw:
        return None
    return float(raw)


def get_cors_origins():
    origins = parse_csv(os.getenv("CORS_ORIGINS", "*"))
    if not origins or origins == ["*"]:
        return "*"
    return origins


def get_port() -> int:
    return int(os.getenv("PORT", "8081"))


def is_debug() -> bool:
    return os.getenv("FLASK_DEBUG", "0").lower() in ["true", "1", "t"]


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_dir() -> str:
    return os.getenv("LOG_DIR", "/app/logs")
