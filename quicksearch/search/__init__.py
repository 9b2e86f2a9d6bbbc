"""
Search package - Term classification and the host-facing provider.

Search terms are classified into actions from a fixed registry (open a
link, or search Google, DuckDuckGo, Bing or YouTube), described for
display, and resolved into a URL when the user picks one.
"""

from .actions import ACTIONS, Action, ActionNotFound, lookup
from .cancellable import Cancellable, Cancelled
from .provider import SearchProvider
from .router import QueryRouter, ResultMeta

__all__ = [
    "ACTIONS",
    "Action",
    "ActionNotFound",
    "Cancellable",
    "Cancelled",
    "QueryRouter",
    "ResultMeta",
    "SearchProvider",
    "lookup",
]
