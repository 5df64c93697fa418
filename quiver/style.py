from __future__ import annotations

from dataclasses import dataclass, field

from prompt_toolkit.styles import Style as PTStyle


@dataclass
class PromptStyle:
    qmark: str = "?"
    qmark_style: str = "bold ansicyan"
    question_style: str = "bold"
    answer_style: str = "bold ansigreen"
    instruction_style: str = "ansibrightblack"
    text_style: str = ""


@dataclass
class MenuStyle:
    pointer: str = "▌"
    pointer_style: str = "bold ansicyan"
    highlighted_style: str = "bold"
    selected_style: str = "ansigreen"
    separator_style: str = "ansibrightblack"
    disabled_style: str = "ansibrightblack italic"


@dataclass
class SummaryStyle:
    prefix: str = "  → "
    selected_style: str = "bold green"
    dim_style: str = "dim"
    password_mask: str = "********"


@dataclass
class Style:
    prompt: PromptStyle = field(default_factory=PromptStyle)
    menu: MenuStyle = field(default_factory=MenuStyle)
    summary: SummaryStyle = field(default_factory=SummaryStyle)

    def to_prompt_toolkit(self) -> PTStyle:
        """Build the prompt_toolkit style questionary renders with."""
        return PTStyle.from_dict(
            {
                "qmark": self.prompt.qmark_style,
                "question": self.prompt.question_style,
                "answer": self.prompt.answer_style,
                "instruction": self.prompt.instruction_style,
                "text": self.prompt.text_style,
                "pointer": self.menu.pointer_style,
                "highlighted": self.menu.highlighted_style,
                "selected": self.menu.selected_style,
                "separator": self.menu.separator_style,
                "disabled": self.menu.disabled_style,
            }
        )


__all__ = [
    "PromptStyle",
    "MenuStyle",
    "SummaryStyle",
    "Style",
]
