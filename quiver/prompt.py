from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import questionary
from prompt_toolkit.input import Input
from prompt_toolkit.output import Output
from questionary.prompts import prompt_by_name
from rich.console import Console
from rich.text import Text

from .style import Style

logger = logging.getLogger(__name__)

default_console = Console()

QUESTIONARY_TYPES = {
    "input": "text",
    "password": "password",
    "editor": "text",
    "list": "select",
    "checkbox": "checkbox",
}

# Record keys each questionary prompt function cannot take.
UNSUPPORTED_KEYS = {
    "text": {"pageSize", "highlight", "loop", "choices"},
    "password": {"pageSize", "highlight", "loop", "choices"},
    "select": {"pageSize", "highlight", "loop", "validate"},
    "checkbox": {"pageSize", "highlight", "loop"},
}


def to_questionary(record: Mapping[str, Any], style: Style | None = None) -> dict[str, Any]:
    """Convert one question record into a ``questionary.prompt`` question dict."""
    style = style or Style()
    kind = record.get("type")
    if kind not in QUESTIONARY_TYPES:
        raise ValueError(f"unsupported question type {kind!r}.")

    target = QUESTIONARY_TYPES[kind]
    dropped = sorted(UNSUPPORTED_KEYS[target].intersection(record))
    if dropped:
        logger.debug("Dropping %s from %s question %r", ", ".join(dropped), kind, record["name"])

    question: dict[str, Any] = {
        key: value for key, value in record.items() if key not in UNSUPPORTED_KEYS[target]
    }
    question["type"] = target

    if kind == "editor":
        question["multiline"] = True
        question["enable_open_in_editor"] = True

    if target in ("select", "checkbox"):
        question["pointer"] = style.menu.pointer
        question["choices"] = [_to_choice(item) for item in record.get("choices", ())]

    return question


def _to_choice(item: Mapping[str, Any]) -> questionary.Choice | questionary.Separator:
    if item.get("type") == "separator":
        return questionary.Separator(item.get("line"))

    return questionary.Choice(
        title=item["name"],
        value=item.get("value", item["name"]),
        disabled=_disabled_label(item.get("disabled")),
        checked=item.get("checked", False),
        shortcut_key=item.get("key") or True,
    )


def _disabled_label(disabled: bool | str | None) -> str | None:
    if not disabled:
        return None
    if disabled is True:
        return "disabled"
    return str(disabled)


class QuestionaryEngine:
    """Default answer engine: asks every record in turn through questionary.

    ``input``/``output`` are handed to prompt_toolkit and default to the
    terminal. Interrupts and questionary errors are not caught.
    """

    def __init__(
        self,
        *,
        style: Style | None = None,
        summary: bool = False,
        console: Console | None = None,
        input: Input | None = None,
        output: Output | None = None,
    ) -> None:
        self.style = style or Style()
        self.summary = summary
        self.console = console
        self.input = input
        self.output = output

    def build(self, record: Mapping[str, Any]) -> tuple[str, questionary.Question]:
        """Create the questionary question for ``record`` and return it with its answer key."""
        config = to_questionary(record, self.style)
        create = prompt_by_name(config.pop("type"))
        name = config.pop("name")

        if self.input is not None:
            config["input"] = self.input
        if self.output is not None:
            config["output"] = self.output

        question = create(
            qmark=self.style.prompt.qmark,
            style=self.style.to_prompt_toolkit(),
            **config,
        )
        return name, question

    async def __call__(self, records: Sequence[Mapping[str, Any]]) -> dict[str, Any]:
        answers: dict[str, Any] = {}
        for record in records:
            name, question = self.build(record)
            answers[name] = await question.unsafe_ask_async()

        if self.summary:
            summarize(records, answers, style=self.style, console=self.console)
        return answers


def summarize(
    records: Sequence[Mapping[str, Any]],
    answers: Mapping[str, Any],
    *,
    style: Style | None = None,
    console: Console | None = None,
) -> None:
    style = style or Style()
    out = console if console is not None else default_console

    for record in records:
        name = record["name"]
        if name not in answers:
            continue

        value = answers[name]
        summary_style = style.summary.selected_style

        if record.get("type") == "password":
            summary = style.summary.password_mask
        elif isinstance(value, (list, tuple, set)):
            summary = ", ".join(str(item) for item in value) if value else "none"
            if not value:
                summary_style = style.summary.dim_style
        else:
            summary = str(value)

        out.print(Text(f"{style.summary.prefix}{name}: {summary}", style=summary_style))


__all__ = [
    "QuestionaryEngine",
    "default_console",
    "summarize",
    "to_questionary",
]
