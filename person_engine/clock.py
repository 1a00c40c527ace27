"""
Clock abstractions for deterministic behavior.

Notes
-----
Engine code must not read the wall-clock date directly. Callers provide a Clock.
Age classification and birth date validation depend on "today", so tests pin it
with a FixedClock.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Protocol


class Clock(Protocol):
    """A source of the current date."""

    def today(self) -> date:
        """
        Return the current local date.

        Returns
        -------
        date
            Today's date.
        """
        ...


@dataclass(frozen=True, slots=True)
class SystemClock:
    """Clock that returns the current local system date."""

    def today(self) -> date:
        """
        Return the current system date.

        Returns
        -------
        date
            Today's date in the local timezone.
        """
        return date.today()


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock that always returns a fixed date (useful for tests)."""

    fixed_date: date

    def today(self) -> date:
        """Return the fixed date."""
        return self.fixed_date


SYSTEM_CLOCK = SystemClock()
