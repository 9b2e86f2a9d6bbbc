"""
Query Router - Classifies search terms into action ids.

The first term decides everything:
  - If it looks like a URL, "open-link" is offered first.
  - Then exactly one engine is offered, picked by shortcut:
      d → duckduckgo, b → bing, y → youtube, g → google
    Anything else falls back to the default engine (google).

Results are never ranked; the order above is the relevance order.
"""

from dataclasses import dataclass
from typing import Optional, Callable, Sequence

from loguru import logger

from quicksearch.search.actions import lookup
from quicksearch.utils.helpers import is_valid_url

OPEN_LINK = "open-link"
DEFAULT_ENGINE = "google"

ENGINE_SHORTCUTS = {
    "d": "duckduckgo",
    "b": "bing",
    "y": "youtube",
    "g": "google",
}


@dataclass
class ResultMeta:
    """Display metadata for one action id, handed to the host."""
    id: str
    name: str
    description: str
    icon_hint: str
    create_icon: Optional[Callable] = None  # size -> host icon


class QueryRouter:
    """Routes search terms to the matching action ids."""

    def __init__(self, shortcuts: dict = None, default_engine: str = DEFAULT_ENGINE):
        self.shortcuts = ENGINE_SHORTCUTS if shortcuts is None else shortcuts
        self.default_engine = default_engine

        # Fail at construction rather than at activation time
        for action_id in [default_engine, *self.shortcuts.values()]:
            lookup(action_id)

    def classify(self, terms: Sequence[str]) -> list[str]:
        """
        Decide which actions apply to the terms.

        Args:
            terms: Search terms as split by the host. An empty sequence
                is treated like a single empty term.

        Returns:
            At most two action ids: "open-link" (if the first term is
            URL-shaped) followed by exactly one engine id.
        """
        key = terms[0] if terms else ""
        identifiers = []

        if is_valid_url(key):
            identifiers.append(OPEN_LINK)

        identifiers.append(self.shortcuts.get(key, self.default_engine))

        logger.debug(f"classify({list(terms)}) -> {identifiers}")
        return identifiers

    def filter(self, ids: Sequence[str], max_results: int) -> list[str]:
        """
        Truncate a result set to at most max_results ids.

        Keeps the input order; nothing is re-ranked.
        """
        logger.debug(f"filter_results({list(ids)}, {max_results})")

        if len(ids) <= max_results:
            return list(ids)

        return list(ids[:max(max_results, 0)])
