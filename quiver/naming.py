from __future__ import annotations

import re

APOSTROPHE_PATTERN = re.compile(r"['’]")
SEPARATOR_PATTERN = re.compile(r"[\W_]+")


def split_words(value: str) -> list[str]:
    """Split ``value`` into words on punctuation, case changes and digit runs."""
    words: list[str] = []
    for chunk in SEPARATOR_PATTERN.split(APOSTROPHE_PATTERN.sub("", value)):
        if chunk:
            words.extend(_split_chunk(chunk))
    return words


def _split_chunk(chunk: str) -> list[str]:
    words: list[str] = []
    current = chunk[0]

    for index in range(1, len(chunk)):
        previous, char = chunk[index - 1], chunk[index]
        following = chunk[index + 1] if index + 1 < len(chunk) else ""

        boundary = (
            (previous.islower() and char.isupper())
            or (previous.isdigit() != char.isdigit())
            or (previous.isupper() and char.isupper() and following.islower())
        )

        if boundary:
            words.append(current)
            current = char
        else:
            current += char

    words.append(current)
    return words


def _join(words: list[str]) -> str:
    head, *tail = words
    return head.lower() + "".join(word[:1].upper() + word[1:].lower() for word in tail)


def camel_case(value: str) -> str:
    """Normalise a question name into a camelCase key.

    ``"user email"``, ``"User Email"`` and ``"user_email"`` all become
    ``"userEmail"``. Applying it to its own output returns the same string.
    """
    words = split_words(value)
    while words:
        result = _join(words)
        # Lone capitals merge on a re-split ("a b c" -> "aBC" -> "aBc").
        resplit = split_words(result)
        if len(resplit) >= len(words):
            return result
        words = resplit
    return ""


__all__ = ["camel_case", "split_words"]
