import re

from flask import current_app


_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def text_or_default(value, default: str) -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value
    return str(value)


def parse_int(value):
    """Leading integer of a query value ("2.5" -> 2, "3abc" -> 3), else None."""
    if value is None or isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


def clamp_pagination(page, limit) -> tuple[int, int]:
    default_limit = current_app.config["FEED_DEFAULT_LIMIT"]
    max_limit = current_app.config["FEED_MAX_LIMIT"]

    page = parse_int(page)
    limit = parse_int(limit)
    page = 1 if page is None else page
    limit = default_limit if limit is None else limit

    page = max(1, page)
    limit = max(1, min(max_limit, limit))
    return page, limit
