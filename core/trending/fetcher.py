"""Fetcher facade over the two trending listings.

Typical use::

    from core.trending.fetcher import trending_repositories

    for repo in trending_repositories(language="python", date_range="weekly"):
        print(repo.full_name, repo.stars_added)
"""

from typing import List, Optional

from core.scrapers.websites.trending_developers_scraper import TrendingDevelopersScraper
from core.scrapers.websites.trending_repositories_scraper import TrendingRepositoriesScraper
from core.trending.models import Developer, Repository
from core.trending.options import TrendingOptions, load_options


class GitHubTrending:
    """Fetches trending repositories and developers for a fixed set of options."""

    def __init__(self, options: Optional[TrendingOptions] = None, user_agent: Optional[str] = None):
        self.options = options or TrendingOptions()
        self.user_agent = user_agent

    def fetch_repositories(self) -> List[Repository]:
        return TrendingRepositoriesScraper(self.options, self.user_agent).fetch_repositories()

    def fetch_developers(self) -> List[Developer]:
        return TrendingDevelopersScraper(self.options, self.user_agent).fetch_developers()


def new(**kwargs) -> GitHubTrending:
    """Create a fetcher from keyword options (see ``load_options``)."""
    return GitHubTrending(load_options(**kwargs))


def trending_repositories(**kwargs) -> List[Repository]:
    """Fetch all repositories from GitHub trending."""
    return new(**kwargs).fetch_repositories()


def trending_developers(**kwargs) -> List[Developer]:
    """Fetch all developers from GitHub trending."""
    return new(**kwargs).fetch_developers()
