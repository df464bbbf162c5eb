# This file defines the abstract base class for all scrapers in the system
# Every listing scraper exposes the same scrape() entry point so the CLI, the API
# and the factory can treat them interchangeably

import abc  # The Abstract Base Classes module enables the creation of abstract classes
from typing import Dict, List, Any  # Type hints for better code documentation and IDE support


class BaseScraper(abc.ABC):
    """Base class for listing scrapers.

    A scraper knows one page layout and turns it into a list of plain
    dictionaries. Concrete scrapers also expose typed fetch methods; scrape()
    is the untyped view used by generic callers such as the factory.
    """

    def __init__(self, name: str, url: str):
        """Initialize the scraper with a name and URL.

        Args:
            name: Identifier for the listing (e.g., "repositories", "developers").
                 Also used to name the scraper's logger.
            url: Address of the listing page, without query string.
        """
        self.name = name  # Store listing identifier
        self.url = url    # Store the target URL

    @abc.abstractmethod
    def scrape(self) -> List[Dict[str, Any]]:
        """Fetch the listing and return one dictionary per row.

        Returns:
            A list of dictionaries, one per listing row, with the field names
            of the scraper's record type.

        Raises:
            requests.RequestException: If the page cannot be fetched.
        """
        raise NotImplementedError("Concrete scraper classes must implement scrape() method")
