from typing import List
from pydantic import BaseModel, Field


class Repository(BaseModel):
    """A repository row of the trending listing."""

    author: str = ""
    name: str = ""
    link: str = ""
    description: str = ""
    language: str = ""
    stars: int = 0
    forks: int = 0
    stars_added: int = Field(
        default=0, description="Stars gained during the selected date range"
    )
    built_by: List[str] = Field(
        default_factory=list, description="Avatar URLs of the top contributors"
    )

    @property
    def full_name(self) -> str:
        return f"{self.author}/{self.name}" if self.author else self.name


class Developer(BaseModel):
    """A developer row of the trending developers listing."""

    name: str = ""
    username: str = ""
    popular_repo: str = ""
    description: str = ""
