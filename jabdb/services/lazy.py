"""
Lazy accessors returned by JabTable.get() and JabTable.find().

An accessor holds no data. Every resolution fetches the table again and
evaluates the lookup from scratch, so an accessor can be resolved any number
of times and always reflects the current persisted state.
"""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Iterable, List, Optional, TypeVar

from ..core.exceptions import JabDBError

T = TypeVar("T")

Predicate = Callable[[Any], Any]


@dataclass(frozen=True)
class Resolution(Generic[T]):
    """Outcome of resolving a lazy accessor: a value, or the error that stopped it."""
    value: Optional[T] = None
    error: Optional[JabDBError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Return the value, raising the stored error if resolution failed."""
        if self.error is not None:
            raise self.error
        return self.value


async def _settle(work: Awaitable[T]) -> Resolution[T]:
    try:
        value = await work
    except JabDBError as e:
        return Resolution(error=e)
    return Resolution(value=value)


class LazyValue(Generic[T]):
    """Deferred lookup of a single value."""

    def __init__(self, fetch: Callable[[], Awaitable[Optional[T]]]):
        self._fetch = fetch

    async def resolve(self) -> Resolution[T]:
        return await _settle(self._fetch())

    async def value(self) -> Optional[T]:
        return (await self.resolve()).unwrap()


class LazyCollection(Generic[T]):
    """Deferred filter over a freshly fetched sequence of values."""

    def __init__(self, fetch: Callable[[], Awaitable[Iterable[T]]], predicate: Predicate):
        self._fetch = fetch
        self._predicate = predicate

    async def _first(self) -> Optional[T]:
        return next((v for v in await self._fetch() if self._predicate(v)), None)

    async def _all(self) -> List[T]:
        return [v for v in await self._fetch() if self._predicate(v)]

    async def resolve_first(self) -> Resolution[T]:
        return await _settle(self._first())

    async def resolve(self) -> Resolution[List[T]]:
        return await _settle(self._all())

    async def value(self) -> Optional[T]:
        """First matching value in table order, or None."""
        return (await self.resolve_first()).unwrap()

    async def values(self) -> List[T]:
        """All matching values in table order."""
        return (await self.resolve()).unwrap()
