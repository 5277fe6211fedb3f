"""Quick check that the API loads, serves sample data and reports health."""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from fastapi.testclient import TestClient
from app.api.main import create_app

client = TestClient(create_app(seed=True))
r = client.get("/api/health")
print("Health status:", r.status_code)
print("Response:", r.json())
r = client.get("/TopRatedMovies")
print("Top rated:", [(m["title"], m["averageRating"]) for m in r.json()])
