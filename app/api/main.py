"""
FastAPI application entry point for the Movie Catalog API.

Run: uvicorn app.api.main:app --host 0.0.0.0 --port 8000
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.config import get_api_host, get_api_port, get_log_level, get_seed_sample
from app.api.routers import movies, system
from app.core.catalog import MovieCatalog, load_sample_catalog
from app.utils.logging_config import configure_api_logging, get_logger

logger = get_logger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report missing or malformed request fields as 400 Bad Request."""
    missing = [".".join(str(p) for p in err["loc"][1:]) or "body" for err in exc.errors()]
    logger.debug(f"Rejected request to {request.url.path}: {missing}")
    return JSONResponse(
        status_code=400,
        content={"detail": f"Invalid or missing fields: {', '.join(missing)}"},
    )


def create_app(catalog: MovieCatalog | None = None, seed: bool | None = None) -> FastAPI:
    """
    Build the API around a catalog instance.

    Args:
        catalog: Catalog to serve (default: a new empty catalog)
        seed: Preload the sample movies (default: CATALOG_SEED_SAMPLE env)

    Returns:
        Configured FastAPI application; the catalog is on app.state.catalog
    """
    if catalog is None:
        catalog = MovieCatalog()
    if seed is None:
        seed = get_seed_sample()
    if seed:
        load_sample_catalog(catalog)

    app = FastAPI(
        title="Movie Catalog API",
        description="REST API for an in-memory movie catalog with ratings",
        version="1.0.0",
    )
    app.state.catalog = catalog

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(movies.router)
    app.include_router(system.router)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": "Movie Catalog API",
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


app = create_app()


def main() -> None:
    """Configure logging and serve the API with uvicorn."""
    import uvicorn

    configure_api_logging(debug=get_log_level() == "DEBUG")
    uvicorn.run(app, host=get_api_host(), port=get_api_port(), log_config=None)


if __name__ == "__main__":
    main()
