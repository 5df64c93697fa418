from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any

from quiver.choice import MISSING, Choice, Separator
from quiver.naming import camel_case
from quiver.validators import Validator, email, not_empty, only_numbers

ChoiceCallback = Callable[[Choice], Any]
ChoiceLookupCallback = Callable[[Choice | None], Any]


class Question:
    """Base prompt definition shared by every question kind.

    ``name`` is normalised with :func:`quiver.naming.camel_case` and used as the
    registry and answer key; ``original_name`` is kept for validation
    messages. ``default`` and ``validate`` use ``""`` to mean "unset" and are
    left out of :meth:`to_dict` in that state.
    """

    type = ""

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("You must provide a name for the question.")

        normalized = camel_case(name)
        if not normalized:
            raise ValueError(f"Question name {name!r} has no usable characters.")

        self.original_name = name
        self.name = normalized
        self._message = ""
        self._default: Any = ""
        self._validate: Validator | str = ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, message={self._message!r})"

    def message(self, message: str = MISSING) -> str | Question:
        """What to ask the user."""
        if message is MISSING:
            return self._message
        self._message = message
        return self

    def default(self, default: Any = MISSING) -> Any:
        """Answer used when the user provides none."""
        if default is MISSING:
            return self._default
        self._default = default
        return self

    def validate(self, validate: Validator | str = MISSING) -> Validator | str | Question:
        """Read, install or clear the answer validator.

        The validator receives the raw answer and returns ``True`` to accept
        it, ``False`` to reject it silently, or a string used as the error
        message. Passing ``""`` removes the current validator.
        """
        if validate is MISSING:
            return self._validate
        if not callable(validate) and validate != "":
            raise TypeError(f"Validate takes a function, received {type(validate).__name__}")

        self._validate = validate
        return self

    def validate_empty(self) -> Question:
        return self.validate(not_empty(self.original_name))

    def validate_email(self) -> Question:
        return self.validate(email)

    def validate_only_numbers(self) -> Question:
        return self.validate(only_numbers)

    @property
    def is_default(self) -> bool:
        return self._default != ""

    @property
    def is_validate(self) -> bool:
        return self._validate != ""

    def to_dict(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "type": self.type,
            "name": self.name,
            "message": self._message,
        }

        if self.is_default:
            record["default"] = self._default
        if self.is_validate:
            record["validate"] = self._validate

        return record


class Input(Question):
    type = "input"


class Password(Question):
    type = "password"


class Editor(Question):
    type = "editor"


class Number(Input):
    """Text input that only accepts digits."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.validate_only_numbers()


class List(Question):
    """Single-select question over an ordered set of choices.

    Choices are keyed by the name they were created with; separators sit in
    the same ordering under synthetic keys and are invisible to the lookup
    methods.
    """

    type = "list"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._choices: dict[Hashable, Choice | Separator] = {}
        self._page_size = 7
        self._highlight = False
        self._loop = False

    def new_choice(self, name: str, callback: ChoiceCallback | None = None) -> List:
        choice = Choice(name)
        if callback is not None:
            callback(choice)
        self._choices[name] = choice
        return self

    def has_choice(self, name: str) -> bool:
        return isinstance(self._choices.get(name), Choice)

    def get_choice(self, name: str, callback: ChoiceLookupCallback) -> List:
        """Pass the named choice, or ``None`` when there is none, to ``callback``."""
        if self.has_choice(name):
            callback(self._choices[name])
        else:
            callback(None)
        return self

    def remove_choice(self, name: str) -> List:
        if self.has_choice(name):
            del self._choices[name]
        return self

    def new_choices(self, names: Iterable[str], callback: ChoiceCallback | None = None) -> List:
        for name in names:
            self.new_choice(name, callback)
        return self

    def add_separator(self, id: Hashable, line: str | None = None) -> List:
        self._choices[("separator", id)] = Separator(line)
        return self

    @property
    def choice_names(self) -> list[str]:
        return [key for key, item in self._choices.items() if isinstance(item, Choice)]

    def page_size(self, page_size: int = MISSING) -> int | List:
        """Number of choices shown at once."""
        if page_size is MISSING:
            return self._page_size
        if isinstance(page_size, bool) or not isinstance(page_size, int):
            raise TypeError(f"Page size takes an int, received {type(page_size).__name__}")
        if page_size < 1:
            raise ValueError("Page size must be at least 1.")

        self._page_size = page_size
        return self

    def highlight(self) -> List:
        self._highlight = True
        return self

    def loop(self) -> List:
        self._loop = True
        return self

    @property
    def is_highlight(self) -> bool:
        return self._highlight

    @property
    def is_loop(self) -> bool:
        return self._loop

    def to_dict(self) -> dict[str, Any]:
        record = super().to_dict()
        record["pageSize"] = self._page_size
        record["highlight"] = self._highlight
        record["loop"] = self._loop
        record["choices"] = [item.to_dict() for item in self._choices.values()]
        return record


class Checkbox(List):
    type = "checkbox"


__all__ = [
    "Question",
    "Input",
    "Password",
    "Editor",
    "Number",
    "List",
    "Checkbox",
]
