from __future__ import annotations

from typing import Generic, Iterable, Iterator, Protocol, TypeVar

from bookmark_bureau.services.errors import DuplicateItemError


class Orderable(Protocol):
    """Anything with a stable identifier and a position among its siblings."""

    @property
    def item_id(self) -> str: ...

    @property
    def sort_order(self) -> int: ...

    def with_sort_order(self, sort_order: int): ...


T = TypeVar("T", bound=Orderable)


class OrderedCollection(Generic[T]):
    """Immutable, ordered set of items keyed by ``item_id``; never sorts."""

    __slots__ = ("_items", "_by_id")

    def __init__(self, items: Iterable[T] = ()) -> None:
        ordered = tuple(items)
        by_id: dict[str, T] = {}
        for item in ordered:
            if item.item_id in by_id:
                raise DuplicateItemError(item.item_id)
            by_id[item.item_id] = item
        self._items = ordered
        self._by_id = by_id

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedCollection):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        ids = ", ".join(item.item_id for item in self._items)
        return f"{type(self).__name__}([{ids}])"

    def contains(self, item_id: str) -> bool:
        return item_id in self._by_id

    def get(self, item_id: str) -> T | None:
        return self._by_id.get(item_id)

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def ids(self) -> list[str]:
        return [item.item_id for item in self._items]

    def to_list(self) -> list[T]:
        return list(self._items)
