import asyncio
import io

import pytest
import questionary
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput
from rich.console import Console

from quiver.factory import Factory
from quiver.prompt import QuestionaryEngine, summarize, to_questionary
from quiver.question import Checkbox, Editor, Input, List, Password
from quiver.style import MenuStyle, Style


def make_console():
    return Console(file=io.StringIO(), width=120, color_system=None)


class TestToQuestionary:
    def test_input_becomes_text(self):
        converted = to_questionary(Input("name").message("Name?").default("bob").to_dict())
        assert converted == {"type": "text", "name": "name", "message": "Name?", "default": "bob"}

    def test_password(self):
        converted = to_questionary(Password("secret").validate_empty().to_dict())
        assert converted["type"] == "password"
        assert callable(converted["validate"])

    def test_editor_is_multiline_text(self):
        converted = to_questionary(Editor("notes").to_dict())
        assert converted["type"] == "text"
        assert converted["multiline"] is True
        assert converted["enable_open_in_editor"] is True

    def test_list_becomes_select_without_unsupported_keys(self):
        record = (
            List("size")
            .new_choice("Small", lambda c: c.value("s").key("s"))
            .add_separator(1)
            .new_choice("Large", lambda c: c.disabled("sold out"))
            .validate_empty()
            .highlight()
            .to_dict()
        )
        converted = to_questionary(record, Style(menu=MenuStyle(pointer=">")))

        assert converted["type"] == "select"
        assert converted["pointer"] == ">"
        for key in ("pageSize", "highlight", "loop", "validate"):
            assert key not in converted

        small, separator, large = converted["choices"]
        assert isinstance(small, questionary.Choice)
        assert small.title == "Small"
        assert small.value == "s"
        assert small.shortcut_key == "s"
        assert isinstance(separator, questionary.Separator)
        assert large.disabled == "sold out"

    def test_checkbox_keeps_validate_and_checked(self):
        record = Checkbox("toppings").new_choice("Ham", lambda c: c.checked())
        record.validate(lambda selected: bool(selected))
        converted = to_questionary(record.to_dict())
        assert converted["type"] == "checkbox"
        assert callable(converted["validate"])
        assert converted["choices"][0].checked is True

    def test_disabled_without_reason_gets_label(self):
        converted = to_questionary(List("x").new_choice("a", lambda c: c.disabled()).to_dict())
        assert converted["choices"][0].disabled == "disabled"

    def test_separator_line(self):
        converted = to_questionary(List("x").add_separator(1, "== more ==").to_dict())
        assert converted["choices"][0].line == "== more =="

    def test_does_not_mutate_record(self):
        record = List("x").new_choice("a").to_dict()
        to_questionary(record)
        assert record["choices"] == [{"name": "a", "value": "a"}]
        assert record["type"] == "list"

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="unsupported question type"):
            to_questionary({"type": "confirm", "name": "ok", "message": "Ok?"})


class TestQuestionaryEngine:
    def run_engine(self, records, keys, **kwargs):
        with create_pipe_input() as pipe:
            pipe.send_text(keys)
            engine = QuestionaryEngine(input=pipe, output=DummyOutput(), **kwargs)
            return asyncio.run(engine(records))

    def test_text_answer(self):
        answers = self.run_engine([Input("user name").message("Name?").to_dict()], "bob\r")
        assert answers == {"userName": "bob"}

    def test_select_answer(self):
        record = List("size").message("Size?").new_choices(["S", "M", "L"]).to_dict()
        assert self.run_engine([record], "\x1b[B\r") == {"size": "M"}

    def test_select_returns_choice_value(self):
        record = List("size").new_choice("Small", lambda c: c.value("s")).to_dict()
        assert self.run_engine([record], "\r") == {"size": "s"}

    def test_checkbox_answer(self):
        record = Checkbox("toppings").new_choices(["ham", "cheese"]).to_dict()
        assert self.run_engine([record], " \r") == {"toppings": ["ham"]}

    def test_build_applies_style(self):
        with create_pipe_input() as pipe:
            engine = QuestionaryEngine(
                style=Style(menu=MenuStyle(pointer=">")), input=pipe, output=DummyOutput()
            )
            name, question = engine.build(Input("user name").message("Name?").to_dict())
        assert name == "userName"
        assert isinstance(question, questionary.Question)

    def test_no_records(self):
        assert asyncio.run(QuestionaryEngine()([])) == {}

    def test_errors_propagate(self):
        with pytest.raises(ValueError, match="unsupported question type"):
            asyncio.run(QuestionaryEngine()([{"type": "confirm", "name": "ok", "message": "?"}]))

    def test_factory_with_summary(self):
        console = make_console()
        with create_pipe_input() as pipe:
            pipe.send_text("hunter2\r")
            engine = QuestionaryEngine(
                summary=True, console=console, input=pipe, output=DummyOutput()
            )
            factory = Factory(engine=engine).password("secret", "Secret?")
            assert factory.ask() == {"secret": "hunter2"}

        output = console.file.getvalue()
        assert "secret: ********" in output
        assert "hunter2" not in output


class TestSummarize:
    def test_formats_answers(self):
        console = make_console()
        records = [
            Input("name").to_dict(),
            Checkbox("toppings").to_dict(),
            Checkbox("extras").to_dict(),
            Input("skipped").to_dict(),
        ]
        summarize(
            records,
            {"name": "bob", "toppings": ["ham", "cheese"], "extras": []},
            console=console,
        )
        lines = [line.rstrip() for line in console.file.getvalue().splitlines()]
        assert lines == [
            "  → name: bob",
            "  → toppings: ham, cheese",
            "  → extras: none",
        ]

    def test_masks_passwords(self):
        console = make_console()
        summarize([Password("pin").to_dict()], {"pin": "1234"}, console=console)
        assert console.file.getvalue().strip() == "→ pin: ********"
