"""Parsing utilities for the optional seventh (year) cron field."""

import re

MIN_YEAR = 1970
MAX_YEAR = 2099

_TERM = re.compile(r"^(?:(?P<any>[*?])|(?P<start>\d+)(?:-(?P<end>\d+))?)(?:/(?P<step>\d+))?$")


def parse_year_field(field: str) -> tuple[int, ...] | None:
    """
    Expand a cron year field into the sorted years it allows.

    Supports:
    - * or ? for any year
    - a single year (2030)
    - ranges (2025-2030)
    - steps (*/2, 2024/4, 2025-2035/5)
    - comma separated lists of the above

    Args:
        field: Raw year field text.

    Returns:
        Sorted tuple of allowed years, or None when the field places no constraint.

    Raises:
        ValueError: If the field is malformed or a year is outside 1970-2099.

    Examples:
        >>> parse_year_field("*")
        >>> parse_year_field("2030,2025-2026")
        (2025, 2026, 2030)
    """
    if field in ("*", "?"):
        return None

    years: set[int] = set()
    for term in field.split(","):
        match = _TERM.match(term)
        if match is None:
            raise ValueError(f"malformed year term '{term}'")

        step = int(match["step"]) if match["step"] is not None else 1
        if step < 1:
            raise ValueError(f"year step must be positive in '{term}'")

        if match["any"] is not None:
            start, end = MIN_YEAR, MAX_YEAR
        else:
            start = int(match["start"])
            if match["end"] is not None:
                end = int(match["end"])
            elif match["step"] is not None:
                # 2024/4 means every 4th year starting at 2024
                end = MAX_YEAR
            else:
                end = start

        for year in (start, end):
            if not MIN_YEAR <= year <= MAX_YEAR:
                raise ValueError(f"year {year} out of range {MIN_YEAR}-{MAX_YEAR}")
        if start > end:
            raise ValueError(f"year range '{term}' is reversed")

        years.update(range(start, end + 1, step))

    return tuple(sorted(years))
