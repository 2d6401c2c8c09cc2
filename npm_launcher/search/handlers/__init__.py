"""
Action handlers - One per request method the host can send.

Each handler performs its action and returns results for the host, or
None when the action produces no output.
"""

from .open_url import OpenUrlHandler
from .registry_search import RegistrySearchHandler

__all__ = [
    "OpenUrlHandler",
    "RegistrySearchHandler",
]
