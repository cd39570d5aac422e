"""General utility functions."""

from __future__ import annotations

import re

__all__ = ["value_matches_regex"]


def value_matches_regex(
    regex: str | re.Pattern[str] | None, value: str
) -> bool:
    """Check whether an attribute value matches a regex.

    Parameters
    ----------
    regex
        Regular expression, either as a string or already compiled. An empty
        or missing regex matches every value.
    value
        Value to check. The whole value must match, not just a prefix.

    Returns
    -------
    bool
        Whether the value is acceptable.
    """
    if not regex:
        return True
    if isinstance(regex, re.Pattern):
        if not regex.pattern:
            return True
        return regex.fullmatch(value) is not None
    return re.fullmatch(regex, value) is not None
