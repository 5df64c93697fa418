from __future__ import annotations

from typing import Any

MISSING: Any = object()


class Choice:
    """One selectable option of a list or checkbox question.

    Accessors read when called without an argument and write, returning the
    choice for chaining, when called with one::

        Choice("Small").value("s").key("1").checked()
    """

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("You must provide a name for the choice.")

        self._name = name
        self._value: Any = MISSING
        self._key = ""
        self._checked = False
        self._disabled: bool | str = False

    def __repr__(self) -> str:
        return f"Choice(name={self._name!r}, value={self.value()!r})"

    def name(self, name: str = MISSING) -> str | Choice:
        """Display name. The key a list stores the choice under never changes."""
        if name is MISSING:
            return self._name
        if not name:
            raise ValueError("You must provide a name for the choice.")
        self._name = name
        return self

    def value(self, value: Any = MISSING) -> Any:
        """Underlying value of the choice; falls back to the name while unset."""
        if value is MISSING:
            return self._name if self._value is MISSING else self._value
        self._value = value
        return self

    def key(self, key: str = MISSING) -> str | Choice:
        if key is MISSING:
            return self._key
        self._key = key
        return self

    def checked(self) -> Choice:
        self._checked = True
        return self

    def disabled(self, reason: bool | str = True) -> Choice:
        """Mark the choice as not selectable, optionally explaining why."""
        self._disabled = reason
        return self

    @property
    def is_checked(self) -> bool:
        return self._checked

    @property
    def is_disabled(self) -> bool:
        return bool(self._disabled)

    def to_dict(self) -> dict[str, Any]:
        record: dict[str, Any] = {"name": self._name, "value": self.value()}

        if self.is_checked:
            record["checked"] = True
        if self.is_disabled:
            record["disabled"] = self._disabled
        if self._key:
            record["key"] = self._key

        return record


class Separator:
    """Non-selectable divider between choices."""

    def __init__(self, line: str | None = None) -> None:
        self.line = line

    def __repr__(self) -> str:
        return f"Separator(line={self.line!r})"

    def to_dict(self) -> dict[str, Any]:
        record: dict[str, Any] = {"type": "separator"}
        if self.line is not None:
            record["line"] = self.line
        return record


__all__ = ["Choice", "Separator", "MISSING"]
