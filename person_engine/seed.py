"""
Seed fixture for the person table.

The same five records populate the table at startup and replace its contents on
restore.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from person_engine.identity import PersonIdSequence
from person_engine.person import Person


@dataclass(frozen=True, slots=True)
class SeedPerson:
    first_name: str
    last_name: str
    birth_date: date


SEED_PEOPLE: tuple[SeedPerson, ...] = (
    SeedPerson("Ashwin", "Sharan", date(2012, 10, 11)),
    SeedPerson("Advik", "Sharan", date(2012, 10, 11)),
    SeedPerson("Layne", "Estes", date(2011, 12, 16)),
    SeedPerson("Mason", "Boyd", date(2003, 4, 20)),
    SeedPerson("Babalu", "Sharan", date(1980, 1, 10)),
)


def seed_people(
    id_sequence: PersonIdSequence, seed: tuple[SeedPerson, ...] = SEED_PEOPLE
) -> list[Person]:
    """
    Build fresh Person instances from the seed fixture.

    Parameters
    ----------
    id_sequence:
        Sequence that assigns each new Person its identity, in fixture order.
    seed:
        Fixture records to build from.

    Returns
    -------
    list[Person]
        New Person objects; callers may mutate them freely.
    """
    return [
        id_sequence.create_person(s.first_name, s.last_name, s.birth_date) for s in seed
    ]
