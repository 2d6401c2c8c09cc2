"""
Result Mapper - Turns registry search hits into host result items.

Each item carries an "open" action for the package page, so selecting
it in the host starts this program again with method=open.
"""

from npm_launcher.search.router import OPEN, Action, ResultItem
from npm_launcher.services.registry import SearchHit

DEFAULT_ICON_PATH = "app.png"


class ResultMapper:
    """Map SearchHits 1:1 and in order onto ResultItems."""

    def __init__(self, icon_path: str = DEFAULT_ICON_PATH):
        self.icon_path = icon_path

    def map(self, hits: list[SearchHit]) -> list[ResultItem]:
        return [self._hit_to_result(hit) for hit in hits]

    def _hit_to_result(self, hit: SearchHit) -> ResultItem:
        return ResultItem(
            title=f"{hit.name} | v{hit.version}",
            subtitle=hit.description,
            action=Action(method=OPEN, parameters=(hit.registry_url,)),
            icon_path=self.icon_path,
        )
