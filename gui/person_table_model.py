"""Qt item model over the engine row collection.

The engine owns the rows. This model only translates PersonRows change
notifications into Qt's begin/end row signals and reads cells through explicit
per-column accessors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from PySide6.QtCore import QAbstractTableModel, QModelIndex, QPersistentModelIndex, Qt

from person_engine.clock import SYSTEM_CLOCK, Clock
from person_engine.person import Person
from person_engine.rows import PersonRows, RowChange, RowChangeKind

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True, slots=True)
class PersonColumn:
    """A table column: header text and how to render a cell for a person."""

    title: str
    accessor: Callable[[Person], str]


def _text(value: str | None) -> str:
    return "" if value is None else value


def build_columns(*, clock: Clock = SYSTEM_CLOCK, show_age_category: bool = True) -> tuple[PersonColumn, ...]:
    """
    Build the table columns.

    Parameters
    ----------
    clock:
        Source of today's date for the age category column.
    show_age_category:
        Whether to append the derived Age Category column.

    Returns
    -------
    tuple[PersonColumn, ...]
        Columns in display order.
    """
    columns = [
        PersonColumn("Id", lambda p: str(p.person_id)),
        PersonColumn("First Name", lambda p: _text(p.first_name)),
        PersonColumn("Last Name", lambda p: _text(p.last_name)),
        PersonColumn(
            "Birth Date",
            lambda p: "" if p.birth_date is None else p.birth_date.strftime(DATE_FORMAT),
        ),
    ]
    if show_age_category:
        columns.append(
            PersonColumn("Age Category", lambda p: p.age_category(clock=clock).value)
        )
    return tuple(columns)


class PersonTableModel(QAbstractTableModel):
    """Read-only table model for a PersonRows collection."""

    def __init__(self, rows: PersonRows, columns: tuple[PersonColumn, ...] | None = None) -> None:
        super().__init__()
        self._rows = rows
        self._columns = columns if columns is not None else build_columns()
        self._unsubscribers = [
            rows.subscribe(self._on_rows_changing, before=True),
            rows.subscribe(self._on_rows_changed),
        ]

    @property
    def rows(self) -> PersonRows:
        return self._rows

    def detach(self) -> None:
        """Stop listening to the row collection."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    # ---------- QAbstractTableModel ----------
    def rowCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._rows)

    def columnCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._columns)

    def data(self, index: QModelIndex | QPersistentModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid():
            return None
        if role != Qt.ItemDataRole.DisplayRole:
            return None
        person = self._rows[index.row()]
        return self._columns[index.column()].accessor(person)

    def headerData(
        self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole
    ) -> Any:
        if role != Qt.ItemDataRole.DisplayRole:
            return None
        if orientation == Qt.Orientation.Horizontal:
            return self._columns[section].title
        return str(section + 1)

    # ---------- Row collection observers ----------
    def _on_rows_changing(self, change: RowChange) -> None:
        if change.kind is RowChangeKind.INSERTED:
            assert change.index is not None
            self.beginInsertRows(QModelIndex(), change.index, change.index)
        elif change.kind is RowChangeKind.REMOVED:
            assert change.index is not None
            self.beginRemoveRows(QModelIndex(), change.index, change.index)
        else:
            self.beginResetModel()

    def _on_rows_changed(self, change: RowChange) -> None:
        if change.kind is RowChangeKind.INSERTED:
            self.endInsertRows()
        elif change.kind is RowChangeKind.REMOVED:
            self.endRemoveRows()
        else:
            self.endResetModel()
