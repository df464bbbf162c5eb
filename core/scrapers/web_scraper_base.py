import requests
from bs4 import BeautifulSoup
from typing import Dict, Optional
import logging
from config.settings import get_settings
from core.scrapers.base import BaseScraper


class WebScraperBase(BaseScraper):
    """Base class for scrapers that fetch and parse an HTML page.

    Adds a shared HTTP session, page fetching with BeautifulSoup parsing and
    the lenient text-to-number coercion used for listing counters.
    """

    def __init__(self, name: str, url: str, user_agent: Optional[str] = None):
        """Initialize the web scraper.

        Args:
            name: Identifier for the listing
            url: URL of the page to scrape
            user_agent: Optional custom user agent string
        """
        super().__init__(name, url)
        settings = get_settings()
        self.user_agent = user_agent or settings.USER_AGENT
        self.timeout = settings.REQUEST_TIMEOUT
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml",
            "Accept-Language": "en-US,en;q=0.9",
        })
        self.logger = logging.getLogger(f"scraper.{name}")

    def get_page(self, url: str = None, params: Dict = None) -> BeautifulSoup:
        """Fetch a page and parse it with BeautifulSoup.

        Args:
            url: URL to fetch, defaults to the scraper's base URL
            params: Optional query parameters

        Returns:
            BeautifulSoup object for HTML parsing

        Raises:
            requests.RequestException: If the request fails or returns 4XX/5XX
        """
        target_url = url or self.url
        self.logger.info("Fetching %s (params=%s)", target_url, params)

        try:
            response = self.session.get(target_url, params=params, timeout=self.timeout)
            response.raise_for_status()  # Raise exception for 4XX/5XX responses
        except requests.RequestException as e:
            self.logger.error("Error fetching %s: %s", target_url, str(e))
            raise

        return self.parse_html(response.text)

    @staticmethod
    def parse_html(markup: str) -> BeautifulSoup:
        return BeautifulSoup(markup, "lxml")

    def extract_count(self, count_text: str) -> int:
        """Extract an integer counter from text.

        Args:
            count_text: String containing a number (e.g., "1,234")

        Returns:
            Integer value, or 0 when the text is not a plain run of ASCII digits
        """
        clean_count = count_text.replace(",", "").strip()
        if not clean_count:
            return 0

        if not (clean_count.isascii() and clean_count.isdigit()):
            self.logger.warning("Could not parse count: %r", count_text)
            return 0

        return int(clean_count)
