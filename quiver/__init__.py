from __future__ import annotations

from quiver.choice import Choice, Separator
from quiver.factory import Engine, Factory
from quiver.naming import camel_case
from quiver.prompt import QuestionaryEngine, summarize, to_questionary
from quiver.question import Checkbox, Editor, Input, List, Number, Password, Question
from quiver.style import MenuStyle, PromptStyle, Style, SummaryStyle
from quiver.validators import Validator, email, not_empty, only_numbers

__all__ = [
    "Factory",
    "Engine",
    "QuestionaryEngine",
    "Question",
    "Input",
    "Password",
    "Editor",
    "Number",
    "List",
    "Checkbox",
    "Choice",
    "Separator",
    "MenuStyle",
    "PromptStyle",
    "Style",
    "SummaryStyle",
    "Validator",
    "camel_case",
    "email",
    "not_empty",
    "only_numbers",
    "summarize",
    "to_questionary",
]
