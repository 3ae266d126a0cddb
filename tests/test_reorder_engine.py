from dataclasses import dataclass, replace

import pytest

from bookmark_bureau.services.collection import OrderedCollection
from bookmark_bureau.services.errors import NotFoundError
from bookmark_bureau.services.reorder import ReorderEngine, SubmittedOrder


@dataclass(frozen=True)
class _Item:
    item_id: str
    sort_order: int = 0

    def with_sort_order(self, sort_order):
        return replace(self, sort_order=sort_order)


class _Reader:
    def __init__(self, *item_ids):
        self.collection = OrderedCollection(
            _Item(item_id, index) for index, item_id in enumerate(item_ids)
        )
        self.calls = []

    def read(self, parent_id):
        self.calls.append(parent_id)
        return self.collection


class _Writer:
    def __init__(self):
        self.calls = []

    def write(self, parent_id, collection):
        self.calls.append((parent_id, collection))


class _BrokenWriter:
    def write(self, parent_id, collection):
        raise ConnectionError("database went away")


def _not_found(parent_id, item_id):
    return NotFoundError(
        f"{item_id} not in {parent_id}", item_id=item_id, parent_id=parent_id
    )


def _engine(reader, writer=None):
    return ReorderEngine(reader, writer or _Writer(), _not_found)


def test_submitted_order_from_rows():
    submitted = SubmittedOrder.from_rows(
        [{"link_id": "a", "sort_order": 2}, {"link_id": "b", "sort_order": "1"}],
        "link_id",
    )

    assert list(submitted) == [("a", 2), ("b", 1)]
    assert len(submitted) == 2
    assert "a" in submitted
    assert submitted.position_of("b") == 1
    assert submitted.position_of("x") is None


def test_submitted_order_repeated_id_keeps_first_slot_and_last_position():
    submitted = SubmittedOrder([("a", 1), ("b", 2), ("a", 5)])

    assert list(submitted) == [("a", 5), ("b", 2)]


def test_input_order_does_not_matter():
    reader = _Reader("A", "B", "C")

    shuffled = _engine(reader).reorder(
        "dash", SubmittedOrder([("C", 3), ("A", 1), ("B", 2)])
    )
    ordered = _engine(reader).reorder(
        "dash", SubmittedOrder([("A", 1), ("B", 2), ("C", 3)])
    )

    assert shuffled.ids() == ["A", "B", "C"]
    assert ordered.ids() == ["A", "B", "C"]


def test_reverse_full_membership_keeps_same_items():
    reader = _Reader("A", "B", "C")

    result = _engine(reader).reorder(
        "dash", SubmittedOrder([("A", 3), ("B", 2), ("C", 1)])
    )

    assert result.ids() == ["C", "B", "A"]
    assert sorted(result.ids()) == sorted(reader.collection.ids())
    assert [item.sort_order for item in result] == [1, 2, 3]


def test_unknown_id_rejects_without_writing():
    reader = _Reader("A", "B")
    writer = _Writer()

    with pytest.raises(NotFoundError) as excinfo:
        _engine(reader, writer).reorder("dash", SubmittedOrder([("A", 1), ("X", 2)]))

    assert excinfo.value.item_id == "X"
    assert excinfo.value.parent_id == "dash"
    assert writer.calls == []


def test_first_unknown_id_is_reported():
    reader = _Reader("A")

    with pytest.raises(NotFoundError) as excinfo:
        _engine(reader).reorder("dash", SubmittedOrder([("Y", 1), ("X", 2)]))

    assert excinfo.value.item_id == "Y"


def test_empty_submission_writes_empty_collection():
    reader = _Reader("A", "B")
    writer = _Writer()

    result = _engine(reader, writer).reorder("dash", SubmittedOrder())

    assert result.is_empty()
    assert len(writer.calls) == 1
    parent_id, written = writer.calls[0]
    assert parent_id == "dash"
    assert written.is_empty()


def test_repeated_reorder_is_idempotent():
    reader = _Reader("A", "B", "C")
    writer = _Writer()
    engine = _engine(reader, writer)
    submitted = SubmittedOrder([("B", 10), ("C", 20), ("A", 30)])

    first = engine.reorder("dash", submitted)
    second = engine.reorder("dash", submitted)

    assert first == second
    assert first.ids() == ["B", "C", "A"]
    assert len(writer.calls) == 2


def test_equal_positions_keep_submission_order():
    reader = _Reader("A", "B")

    result = _engine(reader).reorder("dash", SubmittedOrder([("A", 1), ("B", 1)]))
    swapped = _engine(reader).reorder("dash", SubmittedOrder([("B", 1), ("A", 1)]))

    assert result.ids() == ["A", "B"]
    assert swapped.ids() == ["B", "A"]


def test_positions_are_kept_verbatim():
    reader = _Reader("A", "B", "C")

    result = _engine(reader).reorder(
        "dash", SubmittedOrder([("C", 40), ("A", 7), ("B", 7)])
    )

    assert [(item.item_id, item.sort_order) for item in result] == [
        ("A", 7),
        ("B", 7),
        ("C", 40),
    ]


def test_omitted_members_are_left_out_of_result():
    reader = _Reader("A", "B", "C")
    writer = _Writer()

    result = _engine(reader, writer).reorder("dash", SubmittedOrder([("C", 1)]))

    assert result.ids() == ["C"]
    assert writer.calls[0][1].ids() == ["C"]


def test_writer_receives_the_returned_collection():
    reader = _Reader("A", "B")
    writer = _Writer()

    result = _engine(reader, writer).reorder(
        "dash", SubmittedOrder([("B", 1), ("A", 2)])
    )

    assert writer.calls == [("dash", result)]
    assert reader.calls == ["dash"]


def test_authoritative_collection_is_not_modified():
    reader = _Reader("A", "B")

    _engine(reader).reorder("dash", SubmittedOrder([("B", 5), ("A", 9)]))

    assert [(item.item_id, item.sort_order) for item in reader.collection] == [
        ("A", 0),
        ("B", 1),
    ]


def test_writer_errors_propagate_unchanged():
    reader = _Reader("A")

    with pytest.raises(ConnectionError):
        _engine(reader, _BrokenWriter()).reorder("dash", SubmittedOrder([("A", 1)]))


def test_reorder_collection_skips_the_reader():
    reader = _Reader("A", "B")
    writer = _Writer()
    authoritative = OrderedCollection([_Item("X"), _Item("Y")])

    result = _engine(reader, writer).reorder_collection(
        "dash", authoritative, SubmittedOrder([("Y", 1), ("X", 2)])
    )

    assert result.ids() == ["Y", "X"]
    assert reader.calls == []


def test_submitted_order_accepts_integral_values():
    submitted = SubmittedOrder([("a", 2.0), ("b", "3")])

    assert list(submitted) == [("a", 2), ("b", 3)]


@pytest.mark.parametrize("position", [1.9, "1.5", True, None])
def test_submitted_order_rejects_non_integral_positions(position):
    with pytest.raises((TypeError, ValueError)):
        SubmittedOrder([("a", position)])
