"""
Write operations against the slides resource.

A mutation runs one request and reports a discriminated Outcome instead of
raising. Successful writes invalidate the listed queries so the store
refetches them.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar, Union

from heroslides.admin.errors import ApiError
from heroslides.admin.store import QueryKey, QueryStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    ok = True


@dataclass(frozen=True)
class Failure:
    error: ApiError

    ok = False

    @property
    def message(self) -> str:
        return self.error.user_message


Outcome = Union[Success, Failure]


class Mutation:
    def __init__(
        self,
        name: str,
        fn: Callable[[Any], Any],
        store: QueryStore,
        invalidates: Iterable[QueryKey] = (),
        on_success: Optional[Callable[[Any, Any], None]] = None,
        on_error: Optional[Callable[[ApiError, Any], None]] = None,
    ):
        self.name = name
        self.fn = fn
        self.store = store
        self.invalidates = list(invalidates)
        self.on_success = on_success
        self.on_error = on_error

    def mutate(self, variables: Any = None) -> Outcome:
        try:
            value = self.fn(variables)
        except ApiError as exc:
            logger.warning("Mutation %s failed: %r", self.name, exc)
            if self.on_error:
                self.on_error(exc, variables)
            return Failure(exc)

        logger.info("Mutation %s succeeded", self.name)
        for key in self.invalidates:
            self.store.invalidate(key)
        if self.on_success:
            self.on_success(value, variables)
        return Success(value)
