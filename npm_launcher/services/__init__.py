# npm-launcher Services Package
"""
Backend services for the npm launcher.

Services talk to the outside world (the package registry).
"""

from .registry import RegistrySearchClient, SearchHit

__all__ = ["RegistrySearchClient", "SearchHit"]
