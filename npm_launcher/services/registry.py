"""
Registry Search Client - Query the npms.io package search API.

One blocking GET per search:
    GET https://api.npms.io/v2/search?q=<query>

Expected body (only the fields we read):
    {"results": [{"package": {"name", "version", "description",
                              "links": {"npm"}}}]}
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

import requests
from loguru import logger
from pydantic import BaseModel, ValidationError

from npm_launcher.errors import ApiError, NetworkError, ParseError

DEFAULT_ENDPOINT = "https://api.npms.io/v2/search"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class SearchHit:
    """The subset of a registry result the launcher displays."""
    name: str
    version: str
    description: str
    registry_url: str


class PackageLinks(BaseModel):
    npm: str


class PackageInfo(BaseModel):
    name: str
    version: str
    # Packages published without a description omit the field
    description: Optional[str] = None
    links: PackageLinks


class SearchResult(BaseModel):
    package: PackageInfo


class SearchResponse(BaseModel):
    results: list[SearchResult]


class RegistrySearchClient:
    """
    Search client for the npm registry.

    Args:
        endpoint: Search URL, without query string
        timeout: Seconds before the request is abandoned (None waits forever)
        encode_query: Percent-encode the query text. When False the text
            is appended to the URL as typed.
        session: Object with a requests-compatible get(); defaults to the
            requests module itself.
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        encode_query: bool = False,
        session=None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.encode_query = encode_query
        self._session = session or requests

    def build_url(self, query: str) -> str:
        if self.encode_query:
            return f"{self.endpoint}?{urlencode({'q': query})}"
        return f"{self.endpoint}?q={query}"

    def search(self, query: str) -> list[SearchHit]:
        """
        Run one search and decode the hits.

        Returns:
            Hits in the order the API returned them

        Raises:
            NetworkError: The request could not complete (DNS, connection, timeout)
            ApiError: The API answered with anything other than 200
            ParseError: The body is not JSON or not the expected shape
        """
        url = self.build_url(query)
        logger.debug(f"GET {url}")

        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkError(str(e)) from e

        logger.debug(f"Registry responded with {response.status_code}")
        if response.status_code != 200:
            raise ApiError(response.status_code)

        try:
            body = response.content
        except requests.exceptions.RequestException as e:
            raise NetworkError(str(e), context="Error reading API response body") from e

        hits = self.parse_body(body)
        logger.debug(f"Decoded {len(hits)} hit(s) for '{query}'")
        return hits

    @staticmethod
    def parse_body(body) -> list[SearchHit]:
        """Decode a raw response body into SearchHits."""
        try:
            parsed = SearchResponse.model_validate_json(body)
        except ValidationError as e:
            raise ParseError(str(e), context="Error parsing API response body") from e

        return [
            SearchHit(
                name=entry.package.name,
                version=entry.package.version,
                description=entry.package.description or "",
                registry_url=entry.package.links.npm,
            )
            for entry in parsed.results
        ]
