"""
Module entrypoint for the person table GUI.

This file exists so that `python -m person_table` works consistently in all
environments, including when the gui-script wrapper is not installed.

Notes
-----
This module contains no business logic. It delegates to the GUI app module.
"""

from __future__ import annotations

from gui.app import main


def _run() -> None:
    """
    Launch the person table window.

    Raises
    ------
    SystemExit
        Carries the Qt application exit code.
    """
    raise SystemExit(main())


if __name__ == "__main__":
    _run()
