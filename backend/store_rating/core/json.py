from __future__ import annotations

import orjson


def dumps(v, *, pretty: bool = False) -> str:
    option = orjson.OPT_INDENT_2 if pretty else 0
    return orjson.dumps(v, option=option).decode("utf-8")


def loads(s: str | bytes):
    """Raises ``orjson.JSONDecodeError`` (a ``ValueError``) on malformed input."""
    return orjson.loads(s)
