"""
Person identity assignment.

Notes
-----
Identity values come from an explicit sequence object rather than a
module-level counter. Whoever creates Person rows owns the sequence, which keeps
tests isolated from each other.
"""

from __future__ import annotations

from datetime import date

from person_engine.person import Person


class PersonIdSequence:
    """Strictly increasing integer identities, starting at `start`."""

    def __init__(self, start: int = 0) -> None:
        self._next = start

    @property
    def peek(self) -> int:
        """The identity the next call to next_id() will return."""
        return self._next

    def next_id(self) -> int:
        """
        Reserve and return the next identity.

        Returns
        -------
        int
            An identity greater than every identity previously returned.
        """
        value = self._next
        self._next += 1
        return value

    def create_person(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        birth_date: date | None = None,
    ) -> Person:
        """Create a Person carrying the next identity."""
        return Person(
            first_name=first_name,
            last_name=last_name,
            birth_date=birth_date,
            person_id=self.next_id(),
        )
