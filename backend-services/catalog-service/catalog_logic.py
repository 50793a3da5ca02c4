# backend-services/catalog-service/catalog_logic.py
# Assembles a catalog from the movie-info and ratings-data collaborators
import logging
from typing import Callable, Iterable, List

from shared.contracts import CatalogItem, MovieMetadata, RatingInfo

logger = logging.getLogger(__name__)

# movie-info carries no description yet, so every item gets this placeholder.
DEFAULT_DESCRIPTION = "Description"


def build_catalog(
    movie_ids: Iterable[str],
    fetch_movie: Callable[[str], MovieMetadata],
    fetch_rating: Callable[[str], RatingInfo],
) -> List[CatalogItem]:
    """
    Builds one CatalogItem per movie id, in the order the ids are given.

    Calls are sequential: the metadata call for an id completes before its
    rating call starts, and each id is finished before the next begins.
    Errors raised by either collaborator propagate, so a catalog is either
    complete or not returned at all.
    """
    catalog = []
    for movie_id in movie_ids:
        movie = fetch_movie(movie_id)
        rating = fetch_rating(movie_id)
        logger.debug(f"Catalog item for {movie_id}: {movie.name!r} rated {rating.rating}")
        catalog.append(
            CatalogItem(name=movie.name, description=DEFAULT_DESCRIPTION, rating=rating.rating)
        )
    return catalog
