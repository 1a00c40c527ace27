"""
New person input pane.

Holds the first name, last name and birth date inputs plus the Add button. The
pane is the PersonInputSource the engine reads from when a row is added.

Notes
-----
- QDateEdit cannot be empty, so the minimum date stands in for "no date" and is
  rendered as blank through specialValueText.
- No validation happens here; invalid persons may be added.
"""

from __future__ import annotations

from datetime import date

from PySide6.QtCore import QDate, Signal
from PySide6.QtWidgets import QDateEdit, QGridLayout, QLabel, QLineEdit, QPushButton, QWidget

from person_engine.rows import PersonInput

_NO_DATE = QDate(1900, 1, 1)


def _to_date(value: QDate) -> date | None:
    if not value.isValid() or value == _NO_DATE:
        return None
    return date(value.year(), value.month(), value.day())


class NewPersonPane(QWidget):
    """Input fields for a new person row."""

    add_requested = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        grid = QGridLayout(self)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setHorizontalSpacing(10)
        grid.setVerticalSpacing(5)

        self.first_name_edit = QLineEdit()
        self.last_name_edit = QLineEdit()

        self.birth_date_edit = QDateEdit()
        self.birth_date_edit.setCalendarPopup(True)
        self.birth_date_edit.setDisplayFormat("yyyy-MM-dd")
        self.birth_date_edit.setMinimumDate(_NO_DATE)
        self.birth_date_edit.setSpecialValueText(" ")
        self.birth_date_edit.setDate(_NO_DATE)

        grid.addWidget(QLabel("First Name:"), 0, 0)
        grid.addWidget(self.first_name_edit, 0, 1)
        grid.addWidget(QLabel("Last Name:"), 1, 0)
        grid.addWidget(self.last_name_edit, 1, 1)
        grid.addWidget(QLabel("Birth Date:"), 2, 0)
        grid.addWidget(self.birth_date_edit, 2, 1)

        self.btn_add = QPushButton("Add")
        self.btn_add.clicked.connect(self.add_requested)
        grid.addWidget(self.btn_add, 0, 2)

    # ---------- PersonInputSource ----------
    def read_person_input(self) -> PersonInput:
        """Return the values currently typed into the pane."""
        return PersonInput(
            first_name=self.first_name_edit.text(),
            last_name=self.last_name_edit.text(),
            birth_date=_to_date(self.birth_date_edit.date()),
        )

    def clear_person_input(self) -> None:
        """Reset every input to empty / no date."""
        self.first_name_edit.clear()
        self.last_name_edit.clear()
        self.birth_date_edit.setDate(_NO_DATE)
