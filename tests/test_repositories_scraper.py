"""Tests for the trending repositories scraper."""

import pytest
import requests

from core.scrapers.websites.trending_repositories_scraper import TrendingRepositoriesScraper
from core.trending.models import Repository
from core.trending.options import TrendingOptions


@pytest.fixture
def scraper() -> TrendingRepositoriesScraper:
    return TrendingRepositoriesScraper(TrendingOptions(github_url="https://github.com"))


@pytest.fixture
def repositories(scraper, repositories_html):
    return scraper.parse_repositories(scraper.parse_html(repositories_html))


class TestParseRepositories:
    """Field extraction from listing rows."""

    def test_one_record_per_row(self, repositories):
        assert len(repositories) == 3
        assert all(isinstance(repo, Repository) for repo in repositories)

    def test_title_link(self, repositories):
        repo = repositories[0]
        assert repo.author == "psf"
        assert repo.name == "requests"
        assert repo.link == "https://github.com/psf/requests"
        assert repo.full_name == "psf/requests"

    def test_description(self, repositories):
        assert repositories[0].description == "A simple, yet elegant, HTTP library."
        assert repositories[1].description == ""

    def test_language_present(self, repositories):
        assert repositories[0].language == "Python"

    def test_language_missing_is_unknown(self, repositories):
        """A footer with only two spans has no language span."""
        assert repositories[1].language == "unknown"

    def test_counts_strip_thousands_separators(self, repositories):
        repo = repositories[0]
        assert repo.stars == 51234
        assert repo.forks == 9321
        assert repo.stars_added == 1024

    def test_counts_without_language(self, repositories):
        repo = repositories[1]
        assert repo.stars == 812
        assert repo.forks == 40
        assert repo.stars_added == 57

    def test_built_by_avatars(self, repositories):
        assert repositories[0].built_by == [
            "https://avatars.githubusercontent.com/u/119893?s=40&v=4",
            "https://avatars.githubusercontent.com/u/5271761?s=40&v=4",
        ]

    def test_built_by_skips_images_without_src(self, repositories):
        assert repositories[1].built_by == ["https://avatars.githubusercontent.com/u/42?s=40"]

    def test_malformed_row_defaults_to_zero_values(self, repositories):
        repo = repositories[2]
        assert repo.author == ""
        assert repo.name == ""
        assert repo.link == ""
        assert repo.description == "Row without a title or footer"
        assert repo.language == ""
        assert repo.stars == 0
        assert repo.forks == 0
        assert repo.stars_added == 0
        assert repo.built_by == []

    def test_h1_title_markup(self, scraper):
        html = """
        <div class="Box"><article class="Box-row">
          <h1><a href="/a/b"><span>a /</span>
            b</a></h1>
          <div><span>Go</span><span></span><span>3 stars today</span>
            <a href="/a/b/stargazers">10</a><a href="/a/b/forks">2</a></div>
        </article></div>
        """
        (repo,) = scraper.parse_repositories(scraper.parse_html(html))
        assert (repo.author, repo.name, repo.language) == ("a", "b", "Go")
        assert (repo.stars, repo.forks, repo.stars_added) == (10, 2, 3)

    def test_unparsable_count_is_zero(self, scraper):
        html = """
        <div class="Box"><article class="Box-row">
          <div><span></span><span>lots of stars today</span>
            <a href="/x/stargazers">many</a><a href="/x/forks">1.2k</a></div>
        </article></div>
        """
        (repo,) = scraper.parse_repositories(scraper.parse_html(html))
        assert (repo.stars, repo.forks, repo.stars_added) == (0, 0, 0)

    def test_single_footer_link_is_forks(self, scraper):
        html = """
        <div class="Box"><article class="Box-row">
          <div><a href="/x/forks">7</a></div>
        </article></div>
        """
        (repo,) = scraper.parse_repositories(scraper.parse_html(html))
        assert repo.stars == 0
        assert repo.forks == 7

    def test_no_rows(self, scraper, empty_html):
        assert scraper.parse_repositories(scraper.parse_html(empty_html)) == []


class TestFetchRepositories:
    """Request building and error propagation."""

    def test_request_url_and_params(self, serve, repositories_html):
        calls = serve(repositories_html)
        options = TrendingOptions(
            github_url="https://github.com",
            language="python",
            spoken_language="en",
            date_range="weekly",
        )

        repositories = TrendingRepositoriesScraper(options).fetch_repositories()

        assert len(repositories) == 3
        assert calls[0]["url"] == "https://github.com/trending/python"
        assert calls[0]["params"] == {"spoken_language_code": "en", "since": "weekly"}

    def test_links_use_configured_site_root(self, serve, repositories_html):
        serve(repositories_html)
        options = TrendingOptions(github_url="http://localhost:8080/")

        repositories = TrendingRepositoriesScraper(options).fetch_repositories()

        assert repositories[0].link == "http://localhost:8080/psf/requests"

    def test_scrape_returns_dicts(self, serve, repositories_html):
        serve(repositories_html)

        items = TrendingRepositoriesScraper(TrendingOptions(github_url="https://github.com")).scrape()

        assert items[0]["name"] == "requests"
        assert items[0]["stars_added"] == 1024
        assert set(items[0]) == set(Repository.model_fields)

    def test_http_error_propagates(self, serve):
        serve("Not Found", status_code=404)

        with pytest.raises(requests.exceptions.HTTPError):
            TrendingRepositoriesScraper().fetch_repositories()

    def test_connection_error_propagates(self, serve):
        serve(requests.exceptions.ConnectionError("connection refused"))

        with pytest.raises(requests.exceptions.ConnectionError):
            TrendingRepositoriesScraper().fetch_repositories()
