"""
Search package - Request parsing, routing and result rendering.

A request is decoded into an Action, dispatched to the handler for its
method ("query" or "open"), and any results are written back to the host.
"""

from .router import Action, ActionRouter, ActionHandler, ResultItem, parse_action

__all__ = ["Action", "ActionRouter", "ActionHandler", "ResultItem", "parse_action"]
