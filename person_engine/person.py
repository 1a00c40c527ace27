"""
Person record model.

A Person holds a first name, a last name and an optional birth date. It can
validate itself and classify itself into an age category.

Notes
-----
- Construction never validates. A Person may sit in the row collection in an
  invalid state; validation only runs through is_valid() and save().
- Validation errors are appended to a caller-owned list. Checks are
  independent: every failing check contributes its own message.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from person_engine.clock import SYSTEM_CLOCK, Clock
from person_engine.logging_setup import get_logger

logger = get_logger(__name__)

FIRST_NAME_REQUIRED = "First name must contain minimum one character."
LAST_NAME_REQUIRED = "Last name must contain minimum one character."
BIRTH_DATE_IN_FUTURE = "Birth date must not be in future."


class AgeCategory(str, Enum):
    """Age buckets derived from a birth date."""

    BABY = "BABY"
    CHILD = "CHILD"
    TEEN = "TEEN"
    ADULT = "ADULT"
    SENIOR = "SENIOR"
    UNKNOWN = "UNKNOWN"


def elapsed_years(start: date, end: date) -> int:
    """
    Count whole years elapsed between two dates.

    A year only counts once its anniversary has been reached. The result is
    negative whenever `start` is after `end`.

    Parameters
    ----------
    start:
        Earlier date (birth date).
    end:
        Later date (today).

    Returns
    -------
    int
        Whole elapsed years.
    """
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years


def classify_age(years: int, *, on_anniversary: bool = True) -> AgeCategory:
    """
    Map an age to an AgeCategory.

    Bucket edges are exact ages: BABY [0,2), CHILD [2,13), TEEN [13,19],
    ADULT (19,50], SENIOR (50,inf). An age of `years` whole years is exactly
    `years` only on the anniversary itself; any later day is past that edge.

    Parameters
    ----------
    years:
        Whole elapsed years. Negative means the birth date is in the future.
    on_anniversary:
        True if today is exactly `years` years after the birth date.

    Returns
    -------
    AgeCategory
        The matching bucket, or UNKNOWN for a negative age.
    """
    if years < 0:
        return AgeCategory.UNKNOWN
    if years < 2:
        return AgeCategory.BABY
    if years < 13:
        return AgeCategory.CHILD
    if years < 19 or (years == 19 and on_anniversary):
        return AgeCategory.TEEN
    if years < 50 or (years == 50 and on_anniversary):
        return AgeCategory.ADULT
    return AgeCategory.SENIOR


def _has_text(value: str | None) -> bool:
    return value is not None and bool(value.strip())


@dataclass(slots=True)
class Person:
    """
    A person row.

    Attributes
    ----------
    first_name:
        Given name, possibly None or blank until validated.
    last_name:
        Family name, possibly None or blank until validated.
    birth_date:
        Optional date of birth.
    person_id:
        Identity assigned by a PersonIdSequence. Defaults to 0 for records
        built outside a sequence.
    """

    first_name: str | None = None
    last_name: str | None = None
    birth_date: date | None = None
    person_id: int = 0

    def __str__(self) -> str:
        return (
            f"[person_id={self.person_id}, first_name={self.first_name}, "
            f"last_name={self.last_name}, birth_date={self.birth_date}]"
        )

    def is_valid_birth_date(
        self,
        bdate: date | None,
        errors: list[str] | None = None,
        *,
        clock: Clock = SYSTEM_CLOCK,
    ) -> bool:
        """
        Check that a birth date is not in the future.

        Parameters
        ----------
        bdate:
            Date to check. None is always valid.
        errors:
            Optional error collector. The future-date message is appended once
            when the check fails.
        clock:
            Source of today's date.

        Returns
        -------
        bool
            True if the date is absent or on or before today.
        """
        if bdate is None:
            return True
        if bdate > clock.today():
            if errors is not None:
                errors.append(BIRTH_DATE_IN_FUTURE)
            return False
        return True

    def is_valid(self, errors: list[str], *, clock: Clock = SYSTEM_CLOCK) -> bool:
        """
        Validate this person.

        Every check runs, so a person with a blank first and last name gets
        both messages in a single pass.

        Parameters
        ----------
        errors:
            Error collector; each failing check appends its own message.
        clock:
            Source of today's date for the birth date check.

        Returns
        -------
        bool
            True only if all checks pass.
        """
        valid = True
        if not _has_text(self.first_name):
            errors.append(FIRST_NAME_REQUIRED)
            valid = False
        if not _has_text(self.last_name):
            errors.append(LAST_NAME_REQUIRED)
            valid = False
        if not self.is_valid_birth_date(self.birth_date, errors, clock=clock):
            valid = False
        return valid

    def age_category(self, *, clock: Clock = SYSTEM_CLOCK) -> AgeCategory:
        """Classify this person by age as of today. No birth date is UNKNOWN."""
        if self.birth_date is None:
            return AgeCategory.UNKNOWN
        today = clock.today()
        on_anniversary = (today.month, today.day) == (self.birth_date.month, self.birth_date.day)
        return classify_age(
            elapsed_years(self.birth_date, today), on_anniversary=on_anniversary
        )

    def save(self, errors: list[str], *, clock: Clock = SYSTEM_CLOCK) -> bool:
        """
        Commit this person if it is valid.

        Nothing is persisted; a successful save is logged.

        Parameters
        ----------
        errors:
            Error collector, left holding every reason on failure.
        clock:
            Source of today's date.

        Returns
        -------
        bool
            True if the person was valid and saved.
        """
        if not self.is_valid(errors, clock=clock):
            logger.warning("Not saved %s: %s", self, " ".join(errors))
            return False
        logger.info("Saved %s", self)
        return True
