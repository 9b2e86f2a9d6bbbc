"""
Action Registry - The fixed table of things a search can turn into.

Each action has a display name, description, icon hint and a query
builder that turns the full term list into a destination URL:

  open-link   → https:// + terms as typed
  google      → Google search (default engine, keeps every term)
  duckduckgo  → DuckDuckGo search ("d" shortcut, drops the shortcut term)
  bing        → Bing search ("b" shortcut, drops the shortcut term)
  youtube     → YouTube search ("y" shortcut, drops the shortcut term)

The table is built once at import time and is read-only afterwards.
"""

import urllib.parse
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Sequence


class ActionNotFound(LookupError):
    """Raised when an action id is not in the registry."""


@dataclass(frozen=True)
class Action:
    """A selectable destination: open a link or search an engine."""
    id: str
    name: str
    description: str
    icon_hint: str
    build_query: Callable[[Sequence[str]], str]


def encode_component(text: str) -> str:
    """
    Percent-encode a query value the way browsers' encodeURIComponent does.

    Spaces become %20 (not "+"). Unencodable surrogates are replaced so
    the query builders never raise.
    """
    return urllib.parse.quote(text, safe="!~*'()", errors="replace")


def _open_link(terms: Sequence[str]) -> str:
    # Not encoded and not scheme-aware: "https://x.org" becomes "https://https://x.org"
    return "https://" + " ".join(terms)


def _engine(base_url: str, skip_shortcut: bool) -> Callable[[Sequence[str]], str]:
    """Build a query function appending the encoded terms to base_url."""
    def build(terms: Sequence[str]) -> str:
        words = list(terms)[1:] if skip_shortcut else list(terms)
        return base_url + encode_component(" ".join(words))
    return build


_ACTIONS = (
    Action(
        id="open-link",
        name="Open Link",
        description="Open link in browser",
        icon_hint="web-browser-symbolic",
        build_query=_open_link,
    ),
    # Google is also the no-shortcut default, so it keeps terms[0]
    Action(
        id="google",
        name="Search Google",
        description="Search online with Google",
        icon_hint="web-browser-symbolic",
        build_query=_engine("https://www.google.com/search?q=", skip_shortcut=False),
    ),
    Action(
        id="duckduckgo",
        name="Search DuckDuckGo",
        description="Search online with DuckDuckGo",
        icon_hint="web-browser-symbolic",
        build_query=_engine("https://duckduckgo.com/?q=", skip_shortcut=True),
    ),
    Action(
        id="bing",
        name="Search Bing",
        description="Search online with Bing",
        icon_hint="web-browser-symbolic",
        build_query=_engine("https://www.bing.com/search?q=", skip_shortcut=True),
    ),
    Action(
        id="youtube",
        name="Search YouTube",
        description="Search online with YouTube",
        icon_hint="web-browser-symbolic",
        build_query=_engine("https://www.youtube.com/results?search_query=", skip_shortcut=True),
    ),
)

ACTIONS = MappingProxyType({action.id: action for action in _ACTIONS})


def lookup(action_id: str) -> Action:
    """
    Get the registered action for an id.

    Args:
        action_id: Registry key, e.g. "google"

    Returns:
        The matching Action

    Raises:
        ActionNotFound: If the id is not registered. Ids produced by
            classification are always registered, so this means the
            caller passed an id from somewhere else.
    """
    try:
        return ACTIONS[action_id]
    except KeyError:
        raise ActionNotFound(f"Unknown action: {action_id!r}") from None
