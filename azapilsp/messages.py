"""Validation messages and the suggestion of close alternatives."""

from __future__ import annotations

from typing import Sequence

_INFINITY = 1 << 16


def _strip_dot(key: str) -> str:
    return key[1:] if key.startswith(".") else key


def error_mismatch(key: str, expected: str, actual: str) -> str:
    return f"`{_strip_dot(key)}` is invalid, expect `{expected}` but got `{actual}`"


def error_not_match_any(key: str) -> str:
    return f"`{_strip_dot(key)}` doesn't match any accepted values"


def error_not_match_any_values(key: str, value: str, options: Sequence[str]) -> str:
    suggestion = get_suggestion(value, options)
    return (
        f"`{_strip_dot(key)}`'s value `{value}` is invalid. "
        f"The supported values are [{', '.join(options)}]. Do you mean `{suggestion}`? "
    )


def error_should_not_define_read_only(key: str) -> str:
    return f"`{_strip_dot(key)}` is not expected here, it's read only"


def error_should_not_define(key: str, options: Sequence[str]) -> str:
    suggestion = get_suggestion(key, options)
    return f"`{_strip_dot(key)}` is not expected here. Do you mean `{_strip_dot(suggestion)}`? "


def error_should_define(key: str) -> str:
    return f"`{_strip_dot(key)}` is required, but no definition was found"


def get_suggestion(value: str, options: Sequence[str]) -> str:
    """The first option with the smallest distance to `value`, or "" when there are none."""
    suggestion = ""
    distance = _INFINITY
    for option in options:
        dist = edit_distance(value, option)
        if dist < distance:
            distance = dist
            suggestion = option
    return suggestion


def edit_distance(a: str, b: str) -> int:
    """Byte-wise edit distance in which unmatched leading text of either string is free."""
    left, right = a.encode("utf-8"), b.encode("utf-8")
    previous = [0] * (len(right) + 1)
    for ca in left:
        current = [0]
        for j, cb in enumerate(right, start=1):
            best = previous[j - 1] if ca == cb else _INFINITY
            best = min(best, previous[j] + 1, current[j - 1] + 1, previous[j - 1] + 1)
            current.append(best)
        previous = current
    return previous[-1]