from __future__ import annotations

import re
from collections.abc import Callable, Sequence

ValidatorResult = bool | str
Validator = Callable[[str], ValidatorResult]

EMAIL_PATTERN = re.compile(r"^.+@[^.].*\.[a-z]{2,}$")
NUMBER_PATTERN = re.compile(r"^\d+$", re.ASCII)


def not_empty(name: str) -> Validator:
    """Build a validator rejecting empty answers for the question ``name``.

    Works for text answers and for the list of values a checkbox returns.
    """

    def validate_not_empty(value: str | Sequence[str]) -> ValidatorResult:
        if value:
            return True
        return f"{name} cannot be empty."

    return validate_not_empty


def email(value: str) -> ValidatorResult:
    if EMAIL_PATTERN.fullmatch(value):
        return True
    return "Please provide a valid email address."


def only_numbers(value: str) -> ValidatorResult:
    if NUMBER_PATTERN.fullmatch(value):
        return True
    return "Please provide only numbers."


__all__ = [
    "Validator",
    "ValidatorResult",
    "email",
    "not_empty",
    "only_numbers",
]
