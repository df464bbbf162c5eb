from typing import Dict, Optional, Type
import logging
from core.scrapers.base import BaseScraper
from core.scrapers.websites.trending_developers_scraper import TrendingDevelopersScraper
from core.scrapers.websites.trending_repositories_scraper import TrendingRepositoriesScraper
from core.trending.options import TrendingOptions

logger = logging.getLogger(__name__)


class ScraperFactory:
    """Factory for creating the scraper of a trending listing by name.

    Lets callers (the CLI, the API) pick a listing from user input without
    importing each scraper class.
    """

    # Map of listing names to scraper classes
    SCRAPERS: Dict[str, Type[BaseScraper]] = {
        "repositories": TrendingRepositoriesScraper,
        "developers": TrendingDevelopersScraper,
    }

    @classmethod
    def create_scraper(cls, source: str, options: Optional[TrendingOptions] = None, **kwargs) -> BaseScraper:
        """Create and return a scraper for the specified listing.

        Args:
            source: Name of the listing (must be in SCRAPERS dictionary)
            options: Listing filters passed to the scraper
            **kwargs: Additional keyword arguments for the scraper (e.g. user_agent)

        Raises:
            ValueError: If the listing name is unknown
        """
        if source not in cls.SCRAPERS:
            raise ValueError(
                f"Unknown source '{source}', expected one of: {', '.join(sorted(cls.SCRAPERS))}"
            )

        logger.debug("Creating %s scraper", source)
        return cls.SCRAPERS[source](options=options, **kwargs)
