"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_catalog
from app.core.catalog import MovieCatalog

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(catalog: MovieCatalog = Depends(get_catalog)):
    """Health check with current catalog size."""
    return {"status": "healthy", "movies": len(catalog)}
