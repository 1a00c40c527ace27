"""
Observable row collection of Person records.

The collection is a plain ordered list plus an observer list. Views (the Qt
table model) subscribe and are told about every mutation after it happens.

Notes
-----
- add() never validates. Invalid persons may be shown.
- delete() removes positions in descending order so pending positions stay
  valid while rows are removed.
- restore() is a full reset to the seed fixture, not an undo.
- All operations are synchronous and complete before they return.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Iterable, Iterator, Protocol

from person_engine.errors import RowSelectionError
from person_engine.identity import PersonIdSequence
from person_engine.logging_setup import get_logger
from person_engine.person import Person
from person_engine.seed import SEED_PEOPLE, SeedPerson, seed_people

logger = get_logger(__name__)

NOTHING_SELECTED_NOTICE = "Please select a row to delete."


class RowChangeKind(str, Enum):
    """Kinds of mutation reported to observers."""

    INSERTED = "inserted"
    REMOVED = "removed"
    RESET = "reset"


@dataclass(frozen=True, slots=True)
class RowChange:
    """
    A single mutation of the row collection.

    Attributes
    ----------
    kind:
        What happened.
    index:
        Row position affected by INSERTED / REMOVED. None for RESET.
    """

    kind: RowChangeKind
    index: int | None = None


RowObserver = Callable[[RowChange], None]


@dataclass(frozen=True, slots=True)
class PersonInput:
    """Current values of the new-person input fields."""

    first_name: str | None
    last_name: str | None
    birth_date: date | None


class PersonInputSource(Protocol):
    """Something that holds new-person input, usually a form of widgets."""

    def read_person_input(self) -> PersonInput:
        """Return the current input values."""
        ...

    def clear_person_input(self) -> None:
        """Reset every input to empty / absent."""
        ...


class PersonRows:
    """
    Ordered, mutable collection of Person rows.

    Parameters
    ----------
    id_sequence:
        Identity generator for persons created by this collection. A new
        sequence starting at 0 is used if None.
    seed:
        Fixture used for the initial contents and for restore().
    """

    def __init__(
        self,
        id_sequence: PersonIdSequence | None = None,
        seed: tuple[SeedPerson, ...] = SEED_PEOPLE,
    ) -> None:
        self._ids = id_sequence if id_sequence is not None else PersonIdSequence()
        self._seed = seed
        self._rows: list[Person] = seed_people(self._ids, self._seed)
        self._observers: list[RowObserver] = []
        self._before_observers: list[RowObserver] = []

    # ---------- Read access ----------
    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._rows)

    def __getitem__(self, index: int) -> Person:
        return self._rows[index]

    @property
    def id_sequence(self) -> PersonIdSequence:
        return self._ids

    def snapshot(self) -> list[Person]:
        """Return a shallow copy of the current rows, in order."""
        return list(self._rows)

    # ---------- Observers ----------
    def subscribe(self, observer: RowObserver, *, before: bool = False) -> Callable[[], None]:
        """
        Register an observer for row changes.

        Parameters
        ----------
        observer:
            Called synchronously with a RowChange for each mutation.
        before:
            If True, the observer is called just before the rows change
            instead of just after. Item models need both sides.

        Returns
        -------
        Callable[[], None]
            Function that removes the observer again.
        """
        observers = self._before_observers if before else self._observers
        observers.append(observer)

        def unsubscribe() -> None:
            if observer in observers:
                observers.remove(observer)

        return unsubscribe

    def _notify_before(self, change: RowChange) -> None:
        for observer in list(self._before_observers):
            observer(change)

    def _notify(self, change: RowChange) -> None:
        for observer in list(self._observers):
            observer(change)

    # ---------- Mutations ----------
    def add(self, person: Person) -> int:
        """
        Append a person to the end of the collection.

        The person is given the next identity from the collection's sequence
        as it is inserted, replacing whatever person_id it carried.

        Returns
        -------
        int
            Row position of the new person.
        """
        change = RowChange(RowChangeKind.INSERTED, len(self._rows))
        self._notify_before(change)
        person.person_id = self._ids.next_id()
        self._rows.append(person)
        self._notify(change)
        return len(self._rows) - 1

    def add_from_input(self, source: PersonInputSource) -> Person:
        """
        Create a person from the current input values, append it, and clear the inputs.

        Parameters
        ----------
        source:
            Input holder to read from and reset afterwards.

        Returns
        -------
        Person
            The person that was appended.
        """
        values = source.read_person_input()
        person = Person(values.first_name, values.last_name, values.birth_date)
        self.add(person)
        source.clear_person_input()
        return person

    def delete(self, indices: Iterable[int]) -> int:
        """
        Remove the rows at the given positions.

        Parameters
        ----------
        indices:
            Selected row positions, in any order. Duplicates are ignored.

        Returns
        -------
        int
            Number of rows removed. 0 if nothing was selected.

        Raises
        ------
        RowSelectionError
            If any position is outside the collection. Nothing is removed.
        """
        selected = sorted(set(indices))
        if not selected:
            logger.info(NOTHING_SELECTED_NOTICE)
            return 0

        size = len(self._rows)
        bad = [i for i in selected if i < 0 or i >= size]
        if bad:
            raise RowSelectionError(
                f"Row position(s) out of range for {size} rows: {', '.join(map(str, bad))}"
            )

        for index in reversed(selected):
            change = RowChange(RowChangeKind.REMOVED, index)
            self._notify_before(change)
            del self._rows[index]
            self._notify(change)

        logger.debug("Deleted %d row(s) at %s", len(selected), selected)
        return len(selected)

    def restore(self) -> None:
        """Replace every row with a fresh copy of the seed fixture."""
        change = RowChange(RowChangeKind.RESET)
        self._notify_before(change)
        self._rows = seed_people(self._ids, self._seed)
        self._notify(change)
        logger.debug("Restored %d seed row(s)", len(self._rows))
