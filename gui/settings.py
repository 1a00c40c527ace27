from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WINDOW_TITLE = "Adding/Deleting Rows in a TableViews"


@dataclass(frozen=True, slots=True)
class GuiSettings:
    """
    GUI settings for one run of the application.

    Notes
    -----
    Settings live in memory only. Nothing is read from or written to disk, and
    person rows always start from the seed fixture.
    """

    window_title: str
    log_level: str  # "DEBUG" | "INFO" | "WARNING" | "ERROR"
    show_age_category: bool

    @staticmethod
    def defaults() -> "GuiSettings":
        return GuiSettings(
            window_title=DEFAULT_WINDOW_TITLE,
            log_level="INFO",
            show_age_category=True,
        )
