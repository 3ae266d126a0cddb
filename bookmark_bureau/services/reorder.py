from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, Iterator, Mapping, Protocol

from bookmark_bureau.services.collection import OrderedCollection, T
from bookmark_bureau.services.errors import NotFoundError

logger = logging.getLogger(__name__)


class Reader(Protocol[T]):
    def read(self, parent_id: str) -> OrderedCollection[T]: ...


class Writer(Protocol[T]):
    def write(self, parent_id: str, collection: OrderedCollection[T]) -> None: ...


NotFoundFactory = Callable[[str, str], NotFoundError]


def _as_position(value) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Invalid position: {value!r}")
    position = int(value)
    if not isinstance(value, str) and position != value:
        raise ValueError(f"Invalid position: {value!r}")
    return position


class SubmittedOrder:
    """Client-supplied ``item_id -> position`` pairs, in submission order."""

    __slots__ = ("_positions",)

    def __init__(self, entries: Iterable[tuple[str, int]] = ()) -> None:
        positions: dict[str, int] = {}
        for item_id, position in entries:
            positions[str(item_id)] = _as_position(position)
        self._positions = positions

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Mapping],
        id_key: str,
        position_key: str = "sort_order",
    ) -> SubmittedOrder:
        return cls((row[id_key], row[position_key]) for row in rows)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(self._positions.items())

    def __len__(self) -> int:
        return len(self._positions)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._positions

    def __repr__(self) -> str:
        return f"SubmittedOrder({list(self._positions.items())!r})"

    def position_of(self, item_id: str) -> int | None:
        return self._positions.get(item_id)


class ReorderEngine(Generic[T]):
    def __init__(
        self,
        reader: Reader[T],
        writer: Writer[T],
        not_found: NotFoundFactory,
    ) -> None:
        self.reader = reader
        self.writer = writer
        self.not_found = not_found

    def reorder(self, parent_id: str, submitted: SubmittedOrder) -> OrderedCollection[T]:
        """Reorder the children of ``parent_id`` and persist the result."""
        authoritative = self.reader.read(parent_id)
        return self.reorder_collection(parent_id, authoritative, submitted)

    def reorder_collection(
        self,
        parent_id: str,
        authoritative: OrderedCollection[T],
        submitted: SubmittedOrder,
    ) -> OrderedCollection[T]:
        placed: list[tuple[int, T]] = []
        for item_id, position in submitted:
            item = authoritative.get(item_id)
            if item is None:
                logger.info(
                    "Rejected reorder of %s: unknown item %s", parent_id, item_id
                )
                raise self.not_found(parent_id, item_id)
            placed.append((position, item))

        # list.sort is stable, so equal positions keep submission order.
        placed.sort(key=lambda entry: entry[0])
        reordered: OrderedCollection[T] = OrderedCollection(
            item.with_sort_order(position) for position, item in placed
        )

        self.writer.write(parent_id, reordered)
        logger.debug(
            "Reordered %d of %d items under %s",
            len(reordered),
            len(authoritative),
            parent_id,
        )
        return reordered
