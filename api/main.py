from fastapi import FastAPI, HTTPException, status, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import List, Optional
import logging
import requests

from config.settings import get_settings
from core.scrapers.websites.trending_developers_scraper import TrendingDevelopersScraper
from core.scrapers.websites.trending_repositories_scraper import TrendingRepositoriesScraper
from core.trending.options import DATE_RANGES, load_options
from core.trending.spoken_languages import SPOKEN_LANGUAGE_CODES

from .models import (
    TrendingFilter,
    RepositoryResponse,
    DeveloperResponse,
    SpokenLanguage,
    ErrorResponse,
)

logger = logging.getLogger("trending-api")

settings = get_settings()

app = FastAPI(
    title="GitHub Trending API",
    description="REST API exposing the GitHub trending listings as JSON",
    version=settings.PROJECT_VERSION,
)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

SINCE_PATTERN = "^(" + "|".join(DATE_RANGES) + ")$"


@app.get("/", tags=["General"])
async def root():
    """Root endpoint providing API information."""
    return {
        "name": "GitHub Trending API",
        "version": settings.PROJECT_VERSION,
        "description": "API for reading GitHub's trending repositories and developers",
        "endpoints": {
            "GET /": "This information",
            "GET /repositories": "Get trending repositories",
            "GET /developers": "Get trending developers",
            "GET /spoken-languages": "Get spoken language names and codes",
        },
    }


@app.get(
    "/repositories",
    response_model=RepositoryResponse,
    responses={503: {"model": ErrorResponse}},
    tags=["Trending"],
)
def get_trending_repositories(
    language: Optional[str] = None,
    since: Optional[str] = Query(None, pattern=SINCE_PATTERN),
    spoken_language: Optional[str] = None,
    spoken_language_name: Optional[str] = None,
):
    """Get trending repositories matching the given filters."""
    filters = TrendingFilter(
        language=language,
        since=since,
        spoken_language=spoken_language,
        spoken_language_name=spoken_language_name,
    )
    options = load_options(
        spoken_language=spoken_language,
        spoken_language_name=spoken_language_name,
        language=language,
        date_range=since,
    )
    scraper = TrendingRepositoriesScraper(options)

    try:
        repositories = scraper.fetch_repositories()
    except requests.exceptions.RequestException as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Error accessing GitHub: {str(e)}",
        ) from e

    return RepositoryResponse(
        repositories=repositories,
        count=len(repositories),
        source_url=scraper.url,
        filters=filters,
    )


@app.get(
    "/developers",
    response_model=DeveloperResponse,
    responses={503: {"model": ErrorResponse}},
    tags=["Trending"],
)
def get_trending_developers(
    language: Optional[str] = None,
    since: Optional[str] = Query(None, pattern=SINCE_PATTERN),
):
    """Get trending developers matching the given filters."""
    filters = TrendingFilter(language=language, since=since)
    options = load_options(language=language, date_range=since)
    scraper = TrendingDevelopersScraper(options)

    try:
        developers = scraper.fetch_developers()
    except requests.exceptions.RequestException as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Error accessing GitHub: {str(e)}",
        ) from e

    return DeveloperResponse(
        developers=developers,
        count=len(developers),
        source_url=scraper.url,
        filters=filters,
    )


@app.get("/spoken-languages", response_model=List[SpokenLanguage], tags=["General"])
async def get_spoken_languages():
    """Get the spoken language names accepted by spoken_language_name."""
    return [
        SpokenLanguage(name=name, code=code)
        for name, code in sorted(SPOKEN_LANGUAGE_CODES.items())
    ]


# Error handlers
@app.exception_handler(HTTPException)
async def http_exception_handler(_request, exc):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(Exception)
async def general_exception_handler(_request, exc):
    logger.exception("Unhandled error")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"Unexpected error: {str(exc)}"},
    )


# Run with: uvicorn api.main:app --reload
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)
