import os
from functools import lru_cache
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables with defaults.

    Every value can be overridden through the environment (or a local .env
    file) so the scraper can be pointed at a mirror or a test server without
    code changes.
    """

    # Project metadata
    PROJECT_NAME = "GitHub Trending"
    PROJECT_VERSION = "0.1.0"

    # Scraper Settings
    GITHUB_URL = os.getenv("GITHUB_URL", "https://github.com")
    USER_AGENT = os.getenv(
        "SCRAPER_USER_AGENT", "GitHubTrending/0.1.0 (+https://github.com/trending)"
    )
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def TRENDING_URL(self) -> str:
        """Base URL of the trending listing."""
        return f"{self.GITHUB_URL.rstrip('/')}/trending"


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


# For direct access in other modules
settings = get_settings()
