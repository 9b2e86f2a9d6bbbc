"""
Search Provider - The entry points a desktop search host calls.

Lifecycle of a search, as driven by the host:
  1. start_search(terms)          → action ids
  2. refine_search(ids, terms)    → action ids (as the user keeps typing)
  3. filter_results(ids, n)       → at most n ids
  4. describe_results(ids)        → ResultMeta per id
  5. activate(id, terms)          → destination opened

Steps 1, 2 and 4 are coroutines taking a Cancellable; they either
return a complete result or raise Cancelled.
"""

from typing import Sequence

from loguru import logger

from quicksearch.search.actions import lookup
from quicksearch.search.cancellable import Cancellable, run_cancellable
from quicksearch.search.router import QueryRouter, ResultMeta


class SearchProvider:
    """
    Web search and open-link provider.

    Args:
        host: Host capabilities (open_uri, create_cancel_token, create_icon).
            Defaults to the shared DesktopHost.
        provider_id: Identifier reported to the host
        router: QueryRouter to classify terms with
    """

    def __init__(self, host=None, provider_id: str = "quicksearch@local", router: QueryRouter = None):
        if host is None:
            from quicksearch.services.host import get_default_host
            host = get_default_host()
        self.host = host
        self._id = provider_id
        self.router = router or QueryRouter()

    @property
    def id(self) -> str:
        return self._id

    @property
    def app_info(self):
        """Not backed by an application, so there is no app info."""
        return None

    @property
    def can_launch_search(self) -> bool:
        """There is no detailed results view to hand the search to."""
        return False

    async def start_search(self, terms: Sequence[str], cancellable: Cancellable) -> list[str]:
        """
        Initiate a new search.

        Args:
            terms: The search terms
            cancellable: Token for the request

        Returns:
            Action ids in relevance order

        Raises:
            Cancelled: If the token fires before the ids are delivered
        """
        return await run_cancellable(
            cancellable,
            lambda: self.router.classify(terms),
            "Search cancelled",
        )

    async def refine_search(
        self,
        previous_ids: Sequence[str],
        terms: Sequence[str],
        cancellable: Cancellable,
    ) -> list[str]:
        """
        Refine the current search with expanded terms.

        Always reclassifies from scratch; previous_ids is not narrowed
        since a longer first term can change which actions apply.
        """
        cancellable.raise_if_cancelled("Search cancelled")

        return await self.start_search(terms, cancellable)

    def filter_results(self, ids: Sequence[str], max_results: int) -> list[str]:
        return self.router.filter(ids, max_results)

    async def describe_results(self, ids: Sequence[str], cancellable: Cancellable) -> list[ResultMeta]:
        """
        Get display metadata for result ids.

        Args:
            ids: Action ids, typically from start_search
            cancellable: Token for the request

        Returns:
            One ResultMeta per id, in the same order

        Raises:
            Cancelled: If the token fires first; no metas are delivered
            ActionNotFound: If an id is not a registered action
        """
        return await run_cancellable(
            cancellable,
            lambda: [self._describe(action_id) for action_id in ids],
            "Operation cancelled",
        )

    def _describe(self, action_id: str) -> ResultMeta:
        action = lookup(action_id)
        return ResultMeta(
            id=action.id,
            name=action.name,
            description=action.description,
            icon_hint=action.icon_hint,
            create_icon=lambda size, hint=action.icon_hint: self.host.create_icon(hint, size),
        )

    def create_result_object(self, meta: ResultMeta):
        """Let the host draw its default row for every result."""
        logger.debug(f"create_result_object({meta.id})")
        return None

    def resolve_uri(self, action_id: str, terms: Sequence[str]) -> str:
        """Build the destination URL for an accepted action."""
        return lookup(action_id).build_query(terms)

    def activate(self, action_id: str, terms: Sequence[str]) -> None:
        """
        Open the destination for an accepted result.

        Raises:
            ActionNotFound: If action_id is not a registered action
        """
        uri = self.resolve_uri(action_id, terms)
        logger.debug(f"activate({action_id}) -> {uri}")
        self.host.open_uri(uri)
