# npm-launcher Package
"""
npm package search plugin for JSON-RPC quick launchers.

Actions:
  - query: Search the npm registry and list matching packages
  - open:  Open a package page in the default browser
"""

__version__ = "0.1.0.dev0"
