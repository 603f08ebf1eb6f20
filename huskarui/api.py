"""Small file and date helpers."""

from __future__ import annotations

import datetime
import os
from typing import Union


def read_file_to_string(file_name: Union[str, os.PathLike]) -> str:
    """Return the file's contents decoded as UTF-8."""
    with open(file_name, "rb") as handle:
        return handle.read().decode("utf-8", errors="replace")


def get_week_number(date: datetime.date) -> int:
    """Return the ISO 8601 week number of ``date``."""
    return date.isocalendar()[1]