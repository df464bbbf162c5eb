from core.scrapers.web_scraper_base import WebScraperBase
from core.scrapers.websites.selection import eq, node_text, text_of
from core.trending.models import Repository
from core.trending.options import TrendingOptions
from bs4 import BeautifulSoup, Tag
from typing import Dict, List, Any, Optional

ROW_SELECTOR = ".Box .Box-row"


class TrendingRepositoriesScraper(WebScraperBase):
    """Scraper for the trending repositories listing (github.com/trending).

    Each listing row carries the repository title link, an optional
    description paragraph and a footer of spans (language, contributors,
    stars gained) and links (stargazers, forks). Fields are located by
    position within that footer, so a change in GitHub's markup shows up as
    zeroed or empty fields rather than as an error.
    """

    def __init__(self, options: Optional[TrendingOptions] = None, user_agent: Optional[str] = None):
        """Initialize the repositories scraper.

        Args:
            options: Listing filters; defaults to the unfiltered listing
            user_agent: Optional custom user agent string
        """
        self.options = options or TrendingOptions()
        super().__init__("repositories", self.options.repositories_url(), user_agent)

    def fetch_repositories(self) -> List[Repository]:
        """Fetch the listing and parse every row.

        Raises:
            requests.RequestException: If the page cannot be fetched
        """
        soup = self.get_page(params=self.options.repositories_params())
        repositories = self.parse_repositories(soup)
        self.logger.info("Scraped %d trending repositories", len(repositories))
        return repositories

    def scrape(self) -> List[Dict[str, Any]]:
        return [repo.model_dump() for repo in self.fetch_repositories()]

    def parse_repositories(self, soup: BeautifulSoup) -> List[Repository]:
        return [self.parse_row(row) for row in soup.select(ROW_SELECTOR)]

    def parse_row(self, row: Tag) -> Repository:
        """Parse a single listing row into a Repository."""
        repo = Repository()

        # Title link: "<span>author /</span> name"
        title = row.select_one("h1 a, h2 a")
        if title is not None:
            repo.author = text_of(title.select("span")).strip("/\n ")
            if title.contents:
                repo.name = node_text(title.contents[-1]).strip()
            relative_link = title.get("href", "")
            if relative_link:
                repo.link = self.options.base_url + relative_link

        repo.description = text_of(row.select("p")).strip()

        # Footer spans: [language], built by, stars added
        spans = row.select("div > span")
        if len(spans) == 2:
            lang_idx, built_by_idx, add_idx = None, 0, 1
        else:
            lang_idx, built_by_idx, add_idx = 0, 1, 2

        if lang_idx is not None:
            repo.language = text_of([eq(spans, lang_idx)]).strip()
        else:
            repo.language = "unknown"

        add_parts = text_of([eq(spans, add_idx)]).split()
        if add_parts:
            repo.stars_added = self.extract_count(add_parts[0])

        built_by = eq(spans, built_by_idx)
        if built_by is not None:
            for img in built_by.select("a > img"):
                src = img.get("src")
                if src:
                    repo.built_by.append(src)

        # Footer links: stargazers, forks
        links = row.select("div > a")
        repo.stars = self.extract_count(text_of([eq(links, -2)]))
        repo.forks = self.extract_count(text_of([eq(links, -1)]))

        self.logger.debug(
            "Parsed %s (%s stars, %s forks, +%s)",
            repo.full_name, repo.stars, repo.forks, repo.stars_added,
        )
        return repo
