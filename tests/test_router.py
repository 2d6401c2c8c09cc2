"""
Tests for request parsing and the ActionRouter dispatch logic.

Uses the real router and minimal stub handlers.
"""

import pytest

from npm_launcher.errors import ParseError
from npm_launcher.search.router import Action, ActionRouter, ResultItem, parse_action


class StubHandler:
    """Minimal handler for testing router dispatch."""

    def __init__(self, name, method, results=None):
        self.name = name
        self.method = method
        self._results = results
        self.seen = []

    def handle(self, action):
        self.seen.append(action)
        return self._results


class TestParseAction:
    """Test decoding of the inbound payload."""

    def test_query_payload(self):
        action = parse_action('{"method":"query","parameters":["react"]}')
        assert action == Action("query", ("react",))

    def test_open_payload(self):
        action = parse_action('{"method":"open","parameters":["https://example.com"]}')
        assert action.method == "open"
        assert action.param(0) == "https://example.com"

    def test_missing_parameters_is_empty(self):
        action = parse_action('{"method":"query"}')
        assert action.parameters == ()
        assert action.param(0) == ""

    def test_null_parameters_is_empty(self):
        assert parse_action('{"method":"query","parameters":null}').parameters == ()

    def test_unknown_method_is_accepted(self):
        assert parse_action('{"method":"context_menu","parameters":[]}').method == "context_menu"

    @pytest.mark.parametrize("payload", [
        "",
        "not json",
        "{\"method\": ",
        "[1, 2]",
        '"query"',
        '{"parameters": ["react"]}',
        '{"method": 5}',
        '{"method": "query", "parameters": "react"}',
        '{"method": "query", "parameters": [1]}',
    ])
    def test_malformed_payload_raises(self, payload):
        with pytest.raises(ParseError) as excinfo:
            parse_action(payload)
        assert excinfo.value.report().startswith("Error parsing request: ")

    def test_action_is_immutable(self):
        action = Action("query", ("a",))
        with pytest.raises(AttributeError):
            action.method = "open"


class TestActionRouter:
    """Test method-keyed dispatch."""

    def test_routes_to_handler_for_method(self):
        router = ActionRouter()
        query = StubHandler("q", "query", results=[ResultItem(title="x")])
        opener = StubHandler("o", "open")
        router.register(query)
        router.register(opener)

        name, results = router.route(Action("query", ("react",)))

        assert name == "q"
        assert [r.title for r in results] == ["x"]
        assert opener.seen == []

    def test_handler_returning_none_passes_through(self):
        router = ActionRouter()
        router.register(StubHandler("o", "open"))
        assert router.route(Action("open", ("u",))) == ("o", None)

    def test_unknown_method_is_noop(self):
        router = ActionRouter()
        handler = StubHandler("q", "query", results=[])
        router.register(handler)

        assert router.route(Action("context_menu")) == ("none", None)
        assert handler.seen == []

    def test_later_registration_replaces(self):
        router = ActionRouter()
        router.register(StubHandler("first", "query"))
        router.register(StubHandler("second", "query"))
        name, _ = router.route(Action("query"))
        assert name == "second"
