from core.scrapers.web_scraper_base import WebScraperBase
from core.scrapers.websites.selection import last_child_element, text_of
from core.trending.models import Developer
from core.trending.options import TrendingOptions
from bs4 import BeautifulSoup, Tag
from typing import Dict, List, Any, Optional

ROW_SELECTOR = ".Box .Box-row"


class TrendingDevelopersScraper(WebScraperBase):
    """Scraper for the trending developers listing (github.com/trending/developers)."""

    def __init__(self, options: Optional[TrendingOptions] = None, user_agent: Optional[str] = None):
        self.options = options or TrendingOptions()
        super().__init__("developers", self.options.developers_url(), user_agent)

    def fetch_developers(self) -> List[Developer]:
        """Fetch the listing and parse every row.

        Raises:
            requests.RequestException: If the page cannot be fetched
        """
        soup = self.get_page(params=self.options.developers_params())
        developers = self.parse_developers(soup)
        self.logger.info("Scraped %d trending developers", len(developers))
        return developers

    def scrape(self) -> List[Dict[str, Any]]:
        return [developer.model_dump() for developer in self.fetch_developers()]

    def parse_developers(self, soup: BeautifulSoup) -> List[Developer]:
        return [self.parse_row(row) for row in soup.select(ROW_SELECTOR)]

    def parse_row(self, row: Tag) -> Developer:
        """Parse a single listing row into a Developer.

        The row holds the developer's name and login, followed by an
        article describing their most popular repository.
        """
        developer = Developer(
            name=text_of(row.select("div > div > h1 > a")).strip(),
            username=text_of(row.select("div > div > p > a")).strip(),
            popular_repo=text_of(row.select("div > div > article > h1 > a")).strip(),
        )

        description = last_child_element(row.select("div > div > article"))
        if description is not None:
            developer.description = description.get_text().strip()

        self.logger.debug("Parsed developer %s (%s)", developer.username, developer.name)
        return developer
