from typing import NamedTuple, Optional
from urllib.parse import quote

from config.settings import get_settings
from core.trending.spoken_languages import spoken_language_code

DAILY = "daily"
WEEKLY = "weekly"
MONTHLY = "monthly"

DATE_RANGES = (DAILY, WEEKLY, MONTHLY)


class TrendingOptions(NamedTuple):
    """Query options for one trending listing request.

    All fields default to empty, meaning "no filter". ``github_url`` falls
    back to the configured site root. The ``with_*`` helpers return a new
    instance, so a base set of options can be shared and specialised.
    """

    github_url: str = ""
    spoken_language: str = ""
    language: str = ""
    date_range: str = ""

    @property
    def base_url(self) -> str:
        return (self.github_url or get_settings().GITHUB_URL).rstrip("/")

    def daily(self) -> "TrendingOptions":
        return self._replace(date_range=DAILY)

    def weekly(self) -> "TrendingOptions":
        return self._replace(date_range=WEEKLY)

    def monthly(self) -> "TrendingOptions":
        return self._replace(date_range=MONTHLY)

    def with_date_range(self, date_range: str) -> "TrendingOptions":
        return self._replace(date_range=date_range)

    def with_language(self, language: str) -> "TrendingOptions":
        return self._replace(language=language)

    def with_spoken_language_code(self, code: str) -> "TrendingOptions":
        return self._replace(spoken_language=code)

    def with_spoken_language_full(self, name: str) -> "TrendingOptions":
        """Set the spoken language from its English name ("" if unknown)."""
        return self._replace(spoken_language=spoken_language_code(name))

    def with_url(self, url: str) -> "TrendingOptions":
        return self._replace(github_url=url)

    def repositories_url(self) -> str:
        """URL of the repository listing, without the query string."""
        return f"{self.base_url}/trending/{quote(self.language, safe='')}"

    def repositories_params(self) -> dict:
        return {
            "spoken_language_code": self.spoken_language,
            "since": self.date_range,
        }

    def developers_url(self) -> str:
        """URL of the developer listing, without the query string."""
        url = f"{self.base_url}/trending/developers"
        if self.language:
            url = f"{url}/{quote(self.language, safe='')}"
        return url

    def developers_params(self) -> dict:
        return {"since": self.date_range}


def load_options(
    github_url: Optional[str] = None,
    spoken_language: Optional[str] = None,
    spoken_language_name: Optional[str] = None,
    language: Optional[str] = None,
    date_range: Optional[str] = None,
) -> TrendingOptions:
    """Build options from keyword arguments, ignoring the ones left as None.

    ``spoken_language`` takes an ISO 639-1 code and ``spoken_language_name``
    a full English name; when both are given the name wins.
    """
    options = TrendingOptions()
    if github_url:
        options = options.with_url(github_url)
    if spoken_language is not None:
        options = options.with_spoken_language_code(spoken_language)
    if spoken_language_name is not None:
        options = options.with_spoken_language_full(spoken_language_name)
    if language is not None:
        options = options.with_language(language)
    if date_range is not None:
        options = options.with_date_range(date_range)
    return options
