"""
Client-side query store.

Holds fetched server state keyed by resource identifier. Writes never patch
the cache; they invalidate it and the affected queries are fetched again.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from heroslides.admin.errors import ApiError

logger = logging.getLogger(__name__)

QueryKey = Tuple[str, ...]

LOADING = "loading"
SUCCESS = "success"
ERROR = "error"


class QueryState:
    """Observable state of one query."""

    def __init__(self):
        self.status = LOADING
        self.data: Any = None
        self.error: Optional[ApiError] = None
        self.is_fetching = False
        self.is_stale = True

    @property
    def is_loading(self) -> bool:
        # Only the first load counts; a refetch keeps showing the previous data
        return self.status == LOADING

    def __repr__(self) -> str:
        return f"QueryState(status={self.status!r}, is_fetching={self.is_fetching}, is_stale={self.is_stale})"


class _Query:
    def __init__(self, fetcher: Callable[[], Any]):
        self.fetcher = fetcher
        self.state = QueryState()
        self.listeners: List[Callable[[QueryState], None]] = []


class QueryStore:
    def __init__(self):
        self._queries: Dict[QueryKey, _Query] = {}

    def register(self, key: QueryKey, fetcher: Callable[[], Any]) -> QueryState:
        """Attach a fetcher to a key. Re-registering swaps the fetcher and keeps cached data."""
        query = self._queries.get(key)
        if query is None:
            query = self._queries[key] = _Query(fetcher)
        else:
            query.fetcher = fetcher
        return query.state

    def get_state(self, key: QueryKey) -> QueryState:
        return self._query(key).state

    def read(self, key: QueryKey) -> QueryState:
        """Return the state for key, fetching first if nothing is cached or the data is stale."""
        query = self._query(key)
        if query.state.is_stale and not query.state.is_fetching:
            self._fetch(key, query)
        return query.state

    def fetch(self, key: QueryKey) -> QueryState:
        query = self._query(key)
        self._fetch(key, query)
        return query.state

    def invalidate(self, prefix: QueryKey) -> List[QueryKey]:
        """Mark every query whose key starts with prefix as stale and refetch it."""
        matched = [key for key in self._queries if key[: len(prefix)] == tuple(prefix)]
        for key in matched:
            query = self._queries[key]
            query.state.is_stale = True
            logger.debug("Invalidated query %s", key)
            self._fetch(key, query)
        return matched

    def subscribe(self, key: QueryKey, callback: Callable[[QueryState], None]) -> Callable[[], None]:
        query = self._query(key)
        query.listeners.append(callback)

        def unsubscribe():
            if callback in query.listeners:
                query.listeners.remove(callback)

        return unsubscribe

    def _query(self, key: QueryKey) -> _Query:
        try:
            return self._queries[key]
        except KeyError:
            raise KeyError(f"No query registered for key {key!r}") from None

    def _fetch(self, key: QueryKey, query: _Query) -> None:
        state = query.state
        state.is_fetching = True
        self._notify(query)
        try:
            data = query.fetcher()
        except ApiError as exc:
            logger.warning("Query %s failed: %s", key, exc.message)
            state.status = ERROR
            state.error = exc
        else:
            state.status = SUCCESS
            state.data = data
            state.error = None
        finally:
            state.is_fetching = False
            state.is_stale = False
        self._notify(query)

    def _notify(self, query: _Query) -> None:
        for listener in list(query.listeners):
            listener(query.state)
