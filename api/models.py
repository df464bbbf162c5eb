from typing import List, Optional
from pydantic import BaseModel, Field

from core.trending.models import Developer, Repository


# Request Models
class TrendingFilter(BaseModel):
    """Filters accepted by the listing endpoints."""

    language: Optional[str] = Field(
        default=None, description="Programming language filter, e.g. python"
    )
    since: Optional[str] = Field(
        default=None, description="Date range: daily, weekly or monthly"
    )
    spoken_language: Optional[str] = Field(
        default=None, description="Spoken language code, e.g. zh (repositories only)"
    )
    spoken_language_name: Optional[str] = Field(
        default=None,
        description="Spoken language full name, e.g. chinese (repositories only)",
    )


# Response Models
class RepositoryResponse(BaseModel):
    """Response containing trending repositories."""

    repositories: List[Repository]
    count: int
    source_url: str
    filters: TrendingFilter


class DeveloperResponse(BaseModel):
    """Response containing trending developers."""

    developers: List[Developer]
    count: int
    source_url: str
    filters: TrendingFilter


class SpokenLanguage(BaseModel):
    name: str
    code: str


class ErrorResponse(BaseModel):
    """Error response model."""

    detail: str
