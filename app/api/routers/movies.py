"""
Movie catalog API endpoints.

Each route maps directly onto one MovieCatalog operation. Typed catalog
errors are translated to HTTP status codes here. Path values use the
path converter so ids and search text may contain slashes.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.dependencies import get_catalog
from app.api.models.movie import (
    MovieCreate,
    MovieResponse,
    AverageRatingResponse,
    MessageResponse,
)
from app.api.models.rating import RatingCreate
from app.core.catalog import (
    MovieCatalog,
    DuplicateIdError,
    InvalidRatingError,
    NotFoundError,
)

router = APIRouter(tags=["movies"])


def _to_responses(movies) -> list[MovieResponse]:
    return [MovieResponse.from_movie(m) for m in movies]


@router.post("/addMovie", response_model=MessageResponse)
def add_movie(movie_in: MovieCreate, catalog: MovieCatalog = Depends(get_catalog)):
    """Add a new movie to the catalog."""
    try:
        catalog.add_movie(
            movie_in.id,
            movie_in.title,
            movie_in.director,
            movie_in.release_year,
            movie_in.genre,
        )
    except DuplicateIdError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return MessageResponse(message="Movie added successfully")


@router.post("/rateMovie/{movie_id:path}", response_model=MessageResponse)
def rate_movie(
    movie_id: str,
    rating_in: RatingCreate,
    catalog: MovieCatalog = Depends(get_catalog),
):
    """Record a 1-5 rating for a movie."""
    try:
        catalog.rate_movie(movie_id, rating_in.rating)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidRatingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return MessageResponse(message="Movie rated successfully")


@router.get("/AverageRating/{movie_id:path}", response_model=AverageRatingResponse)
def get_average_rating(movie_id: str, catalog: MovieCatalog = Depends(get_catalog)):
    """Average rating of a movie (null when missing or unrated)."""
    return AverageRatingResponse(average_rating=catalog.average_rating(movie_id))


@router.get("/TopRatedMovies", response_model=list[MovieResponse])
def get_top_rated_movies(
    limit: int | None = Query(None, ge=1),
    catalog: MovieCatalog = Depends(get_catalog),
):
    """Rated movies sorted by average rating, highest first."""
    return _to_responses(catalog.top_rated_movies(limit=limit))


@router.get("/MoviesByGenre/{genre:path}", response_model=list[MovieResponse])
def get_movies_by_genre(genre: str, catalog: MovieCatalog = Depends(get_catalog)):
    """Movies in a genre (case-insensitive)."""
    return _to_responses(catalog.movies_by_genre(genre))


@router.get("/MoviesByDirector/{director:path}", response_model=list[MovieResponse])
def get_movies_by_director(director: str, catalog: MovieCatalog = Depends(get_catalog)):
    """Movies by a director (case-insensitive)."""
    return _to_responses(catalog.movies_by_director(director))


@router.get("/searchMoviesBasedOnKeyword/{keyword:path}", response_model=list[MovieResponse])
def search_movies(keyword: str, catalog: MovieCatalog = Depends(get_catalog)):
    """Movies whose title contains the keyword."""
    return _to_responses(catalog.search_by_keyword(keyword))


@router.get("/getMovie/{movie_id:path}", response_model=MovieResponse)
def get_movie(movie_id: str, catalog: MovieCatalog = Depends(get_catalog)):
    """Get movie details by ID."""
    movie = catalog.get_movie(movie_id)
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return MovieResponse.from_movie(movie)


@router.delete("/removeMovie/{movie_id:path}", response_model=MessageResponse)
def remove_movie(movie_id: str, catalog: MovieCatalog = Depends(get_catalog)):
    """Delete a movie. Missing ids are reported, not treated as errors."""
    if catalog.remove_movie(movie_id):
        return MessageResponse(message="Movie removed")
    return MessageResponse(message="Movie not found")
