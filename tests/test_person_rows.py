from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

import pytest

from person_engine.errors import RowSelectionError
from person_engine.identity import PersonIdSequence
from person_engine.person import Person
from person_engine.rows import (
    NOTHING_SELECTED_NOTICE,
    PersonInput,
    PersonRows,
    RowChange,
    RowChangeKind,
)
from person_engine.seed import SEED_PEOPLE, SeedPerson

SEED_NAMES = [
    ("Ashwin", "Sharan", date(2012, 10, 11)),
    ("Advik", "Sharan", date(2012, 10, 11)),
    ("Layne", "Estes", date(2011, 12, 16)),
    ("Mason", "Boyd", date(2003, 4, 20)),
    ("Babalu", "Sharan", date(1980, 1, 10)),
]


def _names(rows: PersonRows) -> list[tuple[str | None, str | None, date | None]]:
    return [(p.first_name, p.last_name, p.birth_date) for p in rows]


@dataclass
class FakeInput:
    values: PersonInput
    cleared: int = 0
    reads: list[PersonInput] = field(default_factory=list)

    def read_person_input(self) -> PersonInput:
        self.reads.append(self.values)
        return self.values

    def clear_person_input(self) -> None:
        self.cleared += 1
        self.values = PersonInput(first_name="", last_name="", birth_date=None)


def _letters_rows() -> PersonRows:
    seed = tuple(SeedPerson(c, c, date(2000, 1, 1)) for c in "ABCDE")
    return PersonRows(seed=seed)


def test_new_collection_starts_with_seed_fixture() -> None:
    rows = PersonRows()
    assert _names(rows) == SEED_NAMES
    assert [p.person_id for p in rows] == [0, 1, 2, 3, 4]


def test_add_appends_without_validation() -> None:
    rows = PersonRows()
    invalid = Person("", None, date(2999, 1, 1))

    index = rows.add(invalid)

    assert index == 5
    assert len(rows) == 6
    assert rows[5] is invalid


def test_add_assigns_increasing_ids_to_externally_built_persons() -> None:
    rows = PersonRows()
    first = Person("A", "A", None)
    second = Person("B", "B", None, person_id=99)

    rows.add(first)
    rows.add(second)

    ids = [p.person_id for p in rows]
    assert ids == [0, 1, 2, 3, 4, 5, 6]
    assert (first.person_id, second.person_id) == (5, 6)


def test_add_from_input_creates_appends_and_clears() -> None:
    rows = PersonRows()
    source = FakeInput(PersonInput("Jane", "Doe", date(1990, 6, 1)))

    person = rows.add_from_input(source)

    assert rows[-1] is person
    assert (person.first_name, person.last_name, person.birth_date) == ("Jane", "Doe", date(1990, 6, 1))
    assert person.person_id == 5
    assert source.cleared == 1
    assert source.values == PersonInput("", "", None)


def test_add_from_input_accepts_blank_values() -> None:
    rows = PersonRows()
    source = FakeInput(PersonInput("", "", None))

    person = rows.add_from_input(source)

    assert rows[-1] is person
    assert person.is_valid([]) is False


def test_delete_positions_zero_and_two_preserves_order() -> None:
    rows = _letters_rows()

    removed = rows.delete({0, 2})

    assert removed == 2
    assert [p.first_name for p in rows] == ["B", "D", "E"]


def test_delete_accepts_unsorted_and_duplicate_positions() -> None:
    rows = _letters_rows()

    removed = rows.delete([4, 1, 4, 3])

    assert removed == 3
    assert [p.first_name for p in rows] == ["A", "C"]


def test_delete_notifies_in_descending_order() -> None:
    rows = _letters_rows()
    seen: list[RowChange] = []
    rows.subscribe(seen.append)

    rows.delete([0, 2, 3])

    assert seen == [
        RowChange(RowChangeKind.REMOVED, 3),
        RowChange(RowChangeKind.REMOVED, 2),
        RowChange(RowChangeKind.REMOVED, 0),
    ]


def test_delete_empty_selection_is_a_noop_with_notice(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="person_engine.rows")
    rows = PersonRows()
    before = rows.snapshot()
    seen: list[RowChange] = []
    rows.subscribe(seen.append)

    removed = rows.delete([])

    assert removed == 0
    assert rows.snapshot() == before
    assert all(a is b for a, b in zip(rows.snapshot(), before))
    assert seen == []
    assert NOTHING_SELECTED_NOTICE in caplog.text
    assert NOTHING_SELECTED_NOTICE == "Please select a row to delete."


def test_delete_out_of_range_raises_and_mutates_nothing() -> None:
    rows = _letters_rows()
    before = rows.snapshot()

    with pytest.raises(RowSelectionError) as excinfo:
        rows.delete([1, 5])

    assert "5" in str(excinfo.value)
    assert rows.snapshot() == before


def test_delete_negative_position_raises() -> None:
    rows = _letters_rows()
    with pytest.raises(RowSelectionError):
        rows.delete([-1])
    assert len(rows) == 5


def test_restore_after_edits_yields_seed_fixture() -> None:
    rows = PersonRows()
    rows.add(Person("X", "Y", None))
    rows.delete([0, 1, 2])
    rows[0].first_name = "Edited"

    rows.restore()

    assert _names(rows) == SEED_NAMES


def test_restore_builds_fresh_instances_with_new_ids() -> None:
    rows = PersonRows()
    old = rows.snapshot()
    old_max = max(p.person_id for p in old)

    rows.restore()

    assert all(new is not prev for new, prev in zip(rows, old))
    assert all(p.person_id > old_max for p in rows)


def test_restore_on_empty_collection() -> None:
    rows = PersonRows()
    rows.delete(range(len(rows)))
    assert len(rows) == 0

    rows.restore()

    assert _names(rows) == SEED_NAMES


def test_ids_strictly_increase_across_operations() -> None:
    rows = PersonRows()
    source = FakeInput(PersonInput("A", "B", None))
    issued = [p.person_id for p in rows]

    issued.append(rows.add_from_input(source).person_id)
    rows.restore()
    issued.extend(p.person_id for p in rows)
    issued.append(rows.add_from_input(source).person_id)

    assert issued == sorted(set(issued))


def test_collections_with_their_own_sequences_are_independent() -> None:
    a = PersonRows()
    b = PersonRows()
    assert [p.person_id for p in a] == [p.person_id for p in b]


def test_shared_sequence_continues_numbering() -> None:
    seq = PersonIdSequence(start=100)
    rows = PersonRows(id_sequence=seq)
    assert [p.person_id for p in rows] == [100, 101, 102, 103, 104]
    assert rows.id_sequence.peek == 105


def test_observers_see_before_and_after_notifications() -> None:
    rows = PersonRows()
    events: list[tuple[str, RowChange, int]] = []
    rows.subscribe(lambda c: events.append(("before", c, len(rows))), before=True)
    rows.subscribe(lambda c: events.append(("after", c, len(rows))))

    rows.add(Person("A", "B", None))
    rows.restore()

    assert events == [
        ("before", RowChange(RowChangeKind.INSERTED, 5), 5),
        ("after", RowChange(RowChangeKind.INSERTED, 5), 6),
        ("before", RowChange(RowChangeKind.RESET), 6),
        ("after", RowChange(RowChangeKind.RESET), 5),
    ]


def test_unsubscribed_observer_is_not_called() -> None:
    rows = PersonRows()
    seen: list[RowChange] = []
    unsubscribe = rows.subscribe(seen.append)

    unsubscribe()
    rows.add(Person())
    unsubscribe()

    assert seen == []


def test_seed_fixture_contents() -> None:
    assert [(s.first_name, s.last_name, s.birth_date) for s in SEED_PEOPLE] == SEED_NAMES
