# backend-services/catalog-service/services/downstream_clients.py
"""
Downstream service clients for the catalog-service.

This module encapsulates HTTP requests to:
- movie-info:    GET /movies/<movieId>
- ratings-data:  GET /ratingsdata/<movieId>

Each function:
- Accepts a movie identifier and returns the validated shared contract.
- Raises DownstreamServiceError on network errors, non-2xx statuses,
  malformed JSON or contract violations.
"""

import logging
import requests
from typing import Type, TypeVar
from pydantic import BaseModel, ValidationError

import config
from shared.contracts import MovieMetadata, RatingInfo

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Shared session for connection pooling. No retry adapter is mounted.
session = requests.Session()


class DownstreamServiceError(RuntimeError):
    """A collaborator call failed or returned a payload that breaks its contract."""

    def __init__(self, service: str, url: str, reason: str):
        super().__init__(f"Downstream call to {service} failed for {url}: {reason}")
        self.service = service
        self.url = url
        self.reason = reason


def _get_model(service: str, url: str, model: Type[ModelT]) -> ModelT:
    """
    Helper to GET a JSON document and validate it against a contract model.
    """
    logger.debug(f"GET {url}")
    try:
        resp = session.get(url, timeout=config.get_downstream_timeout())
        resp.raise_for_status()
        return model.model_validate_json(resp.content)
    except ValidationError as exc:
        raise DownstreamServiceError(service, url, f"contract violation: {exc}") from exc
    except requests.exceptions.RequestException as exc:
        raise DownstreamServiceError(service, url, str(exc)) from exc


def fetch_movie(movie_id: str) -> MovieMetadata:
    """Call movie-info for the metadata of one movie."""
    url = f"{config.get_movie_info_url()}/movies/{movie_id}"
    return _get_model("movie-info", url, MovieMetadata)


def fetch_rating(movie_id: str) -> RatingInfo:
    """Call ratings-data for the rating of one movie."""
    url = f"{config.get_ratings_data_url()}/ratingsdata/{movie_id}"
    return _get_model("ratings-data", url, RatingInfo)
