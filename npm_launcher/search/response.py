"""
Response Writer - Emits the single JSON line the host reads from stdout.

Output shape:
    {"result":[{"Title":"...","Subtitle":"...","JsonRPCAction":{...},"IcoPath":"..."}]}
"""

import json
import sys
from typing import Optional, TextIO

from loguru import logger

from npm_launcher.search.router import ResultItem


class ResponseWriter:
    """Serialize result items and write them as one line."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def encode(self, items: list[ResultItem]) -> str:
        return json.dumps(
            {"result": [item.to_dict() for item in items]},
            separators=(",", ":"),
        )

    def write(self, items: list[ResultItem]) -> None:
        """Write the response followed by a newline and flush."""
        # Resolved at call time so capsys and redirected stdout are honoured
        stream = self.stream or sys.stdout
        line = self.encode(items)
        logger.debug(f"Writing {len(items)} result(s)")
        stream.write(line + "\n")
        stream.flush()
