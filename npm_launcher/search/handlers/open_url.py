"""
Open URL Handler - Answer "open" requests by launching the browser.

The host sends this when a result is selected; the single parameter is
the package page URL. Nothing is written back to the host.
"""

from typing import Callable, Optional

from npm_launcher.errors import ParseError
from npm_launcher.search.router import OPEN, Action, ActionHandler
from npm_launcher.utils.helpers import open_url


class OpenUrlHandler(ActionHandler):
    """Open the first parameter in the default browser."""

    name = "open_url"
    method = OPEN

    def __init__(self, opener: Optional[Callable[[str], None]] = None):
        self.opener = opener or open_url

    def handle(self, action: Action) -> None:
        url = action.param(0)
        if not url:
            raise ParseError('"open" needs a URL parameter')
        self.opener(url)
        return None
