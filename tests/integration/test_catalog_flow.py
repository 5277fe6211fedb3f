"""
End-to-end test of the catalog over HTTP.

Walks the full journey:
1. Add three movies
2. Rate them
3. Check top rated ordering and queries
4. Remove one movie and re-check ordering
"""

import pytest
from fastapi.testclient import TestClient

from app.api.main import create_app


MOVIES = [
    {"id": "1", "title": "Inception", "director": "Christopher Nolan", "releaseYear": 2010, "genre": "Sci-Fi"},
    {"id": "2", "title": "Interstellar", "director": "Christopher Nolan", "releaseYear": 2014, "genre": "Sci-Fi"},
    {"id": "3", "title": "The Dark Knight", "director": "Christopher Nolan", "releaseYear": 2008, "genre": "Action"},
]


@pytest.fixture
def client():
    return TestClient(create_app(seed=False))


def test_full_catalog_flow(client):
    for movie in MOVIES:
        assert client.post("/addMovie", json=movie).status_code == 200

    for movie_id, rating in [("1", 5), ("1", 4), ("2", 5), ("3", 4)]:
        assert client.post(f"/rateMovie/{movie_id}", json={"rating": rating}).status_code == 200

    top = client.get("/TopRatedMovies").json()
    assert [(m["id"], m["averageRating"]) for m in top] == [("2", 5.0), ("1", 4.5), ("3", 4.0)]

    sci_fi = client.get("/MoviesByGenre/Sci-Fi").json()
    assert [m["id"] for m in sci_fi] == ["1", "2"]

    assert client.get("/AverageRating/1").json()["averageRating"] == 4.5

    assert client.delete("/removeMovie/3").json()["message"] == "Movie removed"

    top = client.get("/TopRatedMovies").json()
    assert [m["id"] for m in top] == ["2", "1"]
    assert client.get("/api/health").json()["movies"] == 2
