"""
Action Router - Dispatches a launcher request to the handler for its method.

The host sends one JSON-RPC style request per process:
    {"method": "query", "parameters": ["react"]}

parse_action() decodes it into an Action. Each handler declares the
method it serves; the router hands the Action to that handler and
returns its results. Unknown methods match nothing.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from npm_launcher.errors import ParseError

QUERY = "query"
OPEN = "open"


@dataclass(frozen=True)
class Action:
    """A decoded request: method name plus positional parameters."""
    method: str
    parameters: tuple = ()

    def param(self, index: int = 0, default: str = "") -> str:
        """Positional parameter, or default when absent."""
        if index < len(self.parameters):
            return self.parameters[index]
        return default

    def to_dict(self) -> dict:
        return {"method": self.method, "parameters": list(self.parameters)}


@dataclass
class ResultItem:
    """A single displayable entry for the host."""
    title: str
    subtitle: str = ""
    action: Optional[Action] = None
    icon_path: str = ""

    def to_dict(self) -> dict:
        """Host schema. Subtitle and JsonRPCAction are dropped when unset."""
        data = {"Title": self.title}
        if self.subtitle:
            data["Subtitle"] = self.subtitle
        if self.action is not None:
            data["JsonRPCAction"] = self.action.to_dict()
        data["IcoPath"] = self.icon_path
        return data


def parse_action(payload: str) -> Action:
    """
    Decode the raw request payload into an Action.

    Args:
        payload: JSON object string, e.g. '{"method": "open", "parameters": ["..."]}'

    Returns:
        The decoded Action. A missing "parameters" key gives an empty tuple.

    Raises:
        ParseError: payload is not a JSON object, has no string "method",
            or "parameters" is not a list of strings.
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise ParseError(str(e)) from e

    if not isinstance(data, dict):
        raise ParseError(f"expected a JSON object, got {type(data).__name__}")

    method = data.get("method")
    if method is None:
        raise ParseError('missing "method" field')
    if not isinstance(method, str):
        raise ParseError('"method" must be a string')

    params = data.get("parameters")
    if params is None:
        params = []
    if not isinstance(params, list) or not all(isinstance(p, str) for p in params):
        raise ParseError('"parameters" must be a list of strings')

    return Action(method=method, parameters=tuple(params))


class ActionHandler(ABC):
    """Base class for all action handlers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler identifier."""
        ...

    @property
    @abstractmethod
    def method(self) -> str:
        """The request method this handler serves."""
        ...

    @abstractmethod
    def handle(self, action: Action) -> Optional[list[ResultItem]]:
        """
        Perform the action.

        Returns results to write to the host, or None when the action
        produces no output.
        """
        ...


class ActionRouter:
    """Routes an Action to the handler registered for its method."""

    def __init__(self):
        self._handlers: dict[str, ActionHandler] = {}

    def register(self, handler: ActionHandler) -> None:
        """Register a handler. A later handler for the same method replaces it."""
        self._handlers[handler.method] = handler

    def route(self, action: Action) -> tuple[str, Optional[list[ResultItem]]]:
        """
        Run the handler for action.method.

        Args:
            action: The decoded request

        Returns:
            Tuple of (handler_name, results_or_None).
            Returns ("none", None) if no handler serves the method.
        """
        handler = self._handlers.get(action.method)
        if handler is None:
            logger.debug(f"No handler for method '{action.method}', ignoring")
            return "none", None

        logger.debug(f"Routing '{action.method}' to {handler.name}")
        return handler.name, handler.handle(action)
