"""
requests wrapper around the Movie Catalog API.
"""

import os
from urllib.parse import quote

import requests


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def _segment(value: str) -> str:
    """Percent-encode a value for use as a single path segment."""
    return quote(str(value), safe="")


def add_movie(
    id: str,
    title: str,
    director: str,
    release_year: int,
    genre: str,
) -> dict:
    """Add a movie to the catalog."""
    payload = {
        "id": id,
        "title": title,
        "director": director,
        "releaseYear": release_year,
        "genre": genre,
    }
    r = requests.post(f"{get_api_base_url()}/addMovie", json=payload, timeout=10)
    r.raise_for_status()
    return r.json()


def rate_movie(movie_id: str, rating: int) -> dict:
    """Rate a movie from 1 to 5."""
    r = requests.post(
        f"{get_api_base_url()}/rateMovie/{_segment(movie_id)}",
        json={"rating": rating},
        timeout=10,
    )
    r.raise_for_status()
    return r.json()


def get_average_rating(movie_id: str) -> float | None:
    """Average rating of a movie, or None if missing or unrated."""
    r = requests.get(f"{get_api_base_url()}/AverageRating/{_segment(movie_id)}", timeout=10)
    r.raise_for_status()
    return r.json()["averageRating"]


def get_top_rated_movies(limit: int | None = None) -> list[dict]:
    """Rated movies, best first."""
    params = {"limit": limit} if limit is not None else None
    r = requests.get(f"{get_api_base_url()}/TopRatedMovies", params=params, timeout=10)
    r.raise_for_status()
    return r.json()


def get_movies_by_genre(genre: str) -> list[dict]:
    r = requests.get(f"{get_api_base_url()}/MoviesByGenre/{_segment(genre)}", timeout=10)
    r.raise_for_status()
    return r.json()


def get_movies_by_director(director: str) -> list[dict]:
    r = requests.get(f"{get_api_base_url()}/MoviesByDirector/{_segment(director)}", timeout=10)
    r.raise_for_status()
    return r.json()


def search_movies(keyword: str) -> list[dict]:
    """Movies whose title contains the keyword."""
    r = requests.get(
        f"{get_api_base_url()}/searchMoviesBasedOnKeyword/{_segment(keyword)}", timeout=10
    )
    r.raise_for_status()
    return r.json()


def get_movie(movie_id: str) -> dict | None:
    """Get one movie, or None when it does not exist."""
    r = requests.get(f"{get_api_base_url()}/getMovie/{_segment(movie_id)}", timeout=10)
    if r.status_code == 404:
        return None
    r.raise_for_status()
    return r.json()


def remove_movie(movie_id: str) -> bool:
    """Delete a movie. Returns True if it existed."""
    r = requests.delete(f"{get_api_base_url()}/removeMovie/{_segment(movie_id)}", timeout=10)
    r.raise_for_status()
    return r.json()["message"] == "Movie removed"


def health_check() -> dict:
    """Check API health."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()
