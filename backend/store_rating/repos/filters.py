from __future__ import annotations

from sqlalchemy import ColumnElement

LIKE_ESCAPE = "\\"


def contains(column, value: str) -> ColumnElement[bool]:
    """Case-insensitive substring match; ``%`` and ``_`` in ``value`` match literally."""
    escaped = (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return column.ilike(f"%{escaped}%", escape=LIKE_ESCAPE)
