# Quicksearch Package
"""
Web search provider for desktop search hosts.

Actions:
  - Open Link: open a URL-shaped first term directly
  - Search Google / DuckDuckGo / Bing / YouTube: picked by shortcut
"""

__version__ = "0.1.0.dev0"
