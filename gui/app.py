"""
Person table GUI app.

Single window: new person inputs, row actions, and a multi-select table backed by
the engine's PersonRows collection.
"""

from __future__ import annotations

import sys

from PySide6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QMessageBox,
    QPushButton,
    QTableView,
    QVBoxLayout,
    QWidget,
)

from gui.new_person_pane import NewPersonPane
from gui.person_table_model import PersonTableModel, build_columns
from gui.settings import GuiSettings
from person_engine.errors import PersonTableError
from person_engine.logging_setup import setup_logging
from person_engine.rows import NOTHING_SELECTED_NOTICE, PersonRows


class AppWindow(QWidget):
    """
    Main window for the person table.

    Responsibilities
    ----------------
    - Collect new person input and append rows (no validation gate)
    - Delete the selected rows, or restore the seed rows
    - Save selected rows, reporting every validation message on failure
    """

    def __init__(self, settings: GuiSettings | None = None, rows: PersonRows | None = None) -> None:
        """
        Initialize the main window and construct the layout.

        Parameters
        ----------
        settings:
            GUI settings. Defaults are used if None.
        rows:
            Row collection to display. A new seeded collection is used if None.
        """
        super().__init__()
        self._settings = settings if settings is not None else GuiSettings.defaults()
        self._rows = rows if rows is not None else PersonRows()

        self.setWindowTitle(self._settings.window_title)
        self.resize(760, 520)

        root = QVBoxLayout(self)
        root.setSpacing(5)
        root.setContentsMargins(10, 10, 10, 10)
        self.setStyleSheet("AppWindow { border: 2px solid blue; border-radius: 5px; }")

        self.new_person_pane = NewPersonPane()
        self.new_person_pane.add_requested.connect(self._add_person)
        root.addWidget(self.new_person_pane)

        actions = QHBoxLayout()
        self.btn_restore = QPushButton("Restore Rows")
        self.btn_restore.clicked.connect(self._restore_rows)
        self.btn_delete = QPushButton("Delete Selected Rows")
        self.btn_delete.clicked.connect(self._delete_selected_rows)
        self.btn_save = QPushButton("Save Selected Rows")
        self.btn_save.setToolTip("Validate the selected rows and save the valid ones.")
        self.btn_save.clicked.connect(self._save_selected_rows)

        actions.addWidget(self.btn_restore)
        actions.addWidget(self.btn_delete)
        actions.addWidget(self.btn_save)
        actions.addStretch(1)
        root.addLayout(actions)

        self.model = PersonTableModel(
            self._rows,
            build_columns(show_age_category=self._settings.show_age_category),
        )
        self.table = QTableView()
        self.table.setModel(self.model)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.ExtendedSelection)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        root.addWidget(self.table, 1)

        self.status_label = QLabel("Ready.")
        self.status_label.setStyleSheet("color: #666; padding: 4px;")
        root.addWidget(self.status_label)

    # ---------- Helpers ----------
    def _selected_positions(self) -> list[int]:
        return sorted({index.row() for index in self.table.selectionModel().selectedRows()})

    def _set_status(self, text: str) -> None:
        self.status_label.setText(text)

    # ---------- Actions ----------
    def _add_person(self) -> None:
        person = self._rows.add_from_input(self.new_person_pane)
        self._set_status(f"Added {person}")

    def _delete_selected_rows(self) -> None:
        positions = self._selected_positions()
        self.table.clearSelection()
        try:
            removed = self._rows.delete(positions)
        except PersonTableError as exc:
            QMessageBox.critical(self, "Delete rows", str(exc))
            return

        if not positions:
            self._set_status(NOTHING_SELECTED_NOTICE)
        else:
            self._set_status(f"Deleted {removed} row(s).")

    def _restore_rows(self) -> None:
        self._rows.restore()
        self._set_status(f"Restored {len(self._rows)} row(s).")

    def _save_selected_rows(self) -> None:
        positions = self._selected_positions()
        if not positions:
            self._set_status("Please select a row to save.")
            return

        failures: list[str] = []
        saved = 0
        for position in positions:
            person = self._rows[position]
            errors: list[str] = []
            if person.save(errors):
                saved += 1
            else:
                failures.append(f"Row {position + 1} {person}:\n  " + "\n  ".join(errors))

        self._set_status(f"Saved {saved} of {len(positions)} row(s).")
        if failures:
            QMessageBox.warning(self, "Save rows", "\n\n".join(failures))

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Detach the table model from the row collection before closing."""
        try:
            self.model.detach()
        finally:
            super().closeEvent(event)


def main() -> int:
    """
    Run the person table application.

    Returns
    -------
    int
        Qt application exit code.
    """
    settings = GuiSettings.defaults()
    setup_logging(settings.log_level)

    app = QApplication(sys.argv)
    w = AppWindow(settings)
    w.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
