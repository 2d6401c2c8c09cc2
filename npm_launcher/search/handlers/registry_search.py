"""
Registry Search Handler - Answer "query" requests with npm packages.

An empty query shows a waiting placeholder without touching the network.
Anything else is searched on the registry and every hit is listed.
"""

from typing import Optional

from loguru import logger

from npm_launcher.search.mapper import ResultMapper
from npm_launcher.search.router import QUERY, Action, ActionHandler, ResultItem
from npm_launcher.services.registry import RegistrySearchClient

PLACEHOLDER_TITLE = "Waiting for query..."
PLACEHOLDER_SUBTITLE = "Hello from go!"


class RegistrySearchHandler(ActionHandler):
    """List npm packages matching the query text."""

    name = "registry_search"
    method = QUERY

    def __init__(
        self,
        client: Optional[RegistrySearchClient] = None,
        mapper: Optional[ResultMapper] = None,
    ):
        self.client = client or RegistrySearchClient()
        self.mapper = mapper or ResultMapper()

    def handle(self, action: Action) -> list[ResultItem]:
        query = action.param(0)
        if not query:
            return [ResultItem(title=PLACEHOLDER_TITLE, subtitle=PLACEHOLDER_SUBTITLE)]

        hits = self.client.search(query)
        logger.debug(f"Mapping {len(hits)} hit(s) for '{query}'")
        return self.mapper.map(hits)
