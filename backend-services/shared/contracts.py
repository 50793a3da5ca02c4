# backend-services/shared/contracts.py
"""
This module defines the Pydantic models that serve as the formal data contracts
for all inter-service communication in the movie catalog backend.

These models ensure data consistency, provide automatic validation, and act as
living documentation for the data structures exchanged between microservices.
"""

from typing import List, Optional, TypeAlias
from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Contract 1: MovieMetadata ---
class MovieMetadata(BaseModel):
    """Movie details served by movie-info at /movies/<movieId>."""
    model_config = ConfigDict(extra='ignore')

    movieId: Optional[str] = None
    name: str


# --- Contract 2: RatingInfo ---
class RatingInfo(BaseModel):
    """A movie's rating served by ratings-data at /ratingsdata/<movieId>."""
    model_config = ConfigDict(extra='ignore')

    movieId: Optional[str] = None
    rating: int

    @field_validator("rating", mode="before")
    @classmethod
    def reject_boolean_rating(cls, value):
        # bool is an int subclass; JSON true/false is not a rating
        if isinstance(value, bool):
            raise ValueError("rating must be an integer, not a boolean")
        return value


# --- Contract 3: CatalogItem ---
class CatalogItem(BaseModel):
    """One entry of a user's catalog, as returned by catalog-service."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str = Field(..., alias='desc') # 'desc' on the wire
    rating: int


CatalogResponse: TypeAlias = List[CatalogItem]
"""The ordered list returned by GET /catalog/<userId>."""


# --- Contract 4: ApiError ---
class ApiError(BaseModel):
    """Uniform error body for non-2xx responses."""
    error: str
