"""
npm Launcher - Process entry point

The host starts one process per request and passes the JSON-RPC payload
as the last argument:

  npm-launcher '{"method": "query", "parameters": ["react"]}'
  npm-launcher '{"method": "open", "parameters": ["https://www.npmjs.com/package/react"]}'

Exit status is 0 on success and 1 on any failure. Failures are reported
on stdout as "<context>: <message>".
"""

import sys
from typing import Callable, Optional, TextIO

from loguru import logger

from npm_launcher.errors import LauncherError, ParseError
from npm_launcher.search.handlers import OpenUrlHandler, RegistrySearchHandler
from npm_launcher.search.mapper import ResultMapper
from npm_launcher.search.response import ResponseWriter
from npm_launcher.search.router import ActionRouter, parse_action
from npm_launcher.services.registry import RegistrySearchClient
from npm_launcher.utils.helpers import configure_logging, load_settings


def build_router(
    settings: dict,
    opener: Optional[Callable[[str], None]] = None,
    session=None,
) -> ActionRouter:
    """Wire both handlers from settings."""
    registry = settings["registry"]
    client = RegistrySearchClient(
        endpoint=registry["endpoint"],
        timeout=registry.get("timeout") or None,
        encode_query=bool(registry.get("encode_query", False)),
        session=session,
    )
    mapper = ResultMapper(icon_path=settings["results"]["icon_path"])

    router = ActionRouter()
    router.register(RegistrySearchHandler(client=client, mapper=mapper))
    router.register(OpenUrlHandler(opener=opener))
    return router


def run(
    argv: list,
    stdout: Optional[TextIO] = None,
    settings: Optional[dict] = None,
    opener: Optional[Callable[[str], None]] = None,
    session=None,
) -> int:
    """
    Handle one request and return the process exit status.

    Args:
        argv: Full argument vector; the last entry is the request payload
        stdout: Stream for the host response (defaults to sys.stdout)
        settings: Pre-loaded settings (defaults to load_settings())
        opener: URL opener used for "open" requests
        session: requests-compatible object used for registry calls
    """
    stdout = stdout or sys.stdout
    settings = settings or load_settings()
    configure_logging(settings["logging"]["level"])

    try:
        if len(argv) < 2:
            raise ParseError("no request payload given")
        action = parse_action(argv[-1])

        router = build_router(settings, opener=opener, session=session)
        handler_name, results = router.route(action)

        if results is not None:
            ResponseWriter(stdout).write(results)
    except LauncherError as e:
        logger.error(e.report())
        stdout.write(e.report() + "\n")
        stdout.flush()
        return 1

    logger.debug(f"Handled '{action.method}' with {handler_name}")
    return 0


def main() -> None:
    sys.exit(run(sys.argv))


if __name__ == "__main__":
    main()
