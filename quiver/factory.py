from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterator, Mapping, Sequence
from typing import Any

from quiver.naming import camel_case
from quiver.prompt import QuestionaryEngine
from quiver.question import Checkbox, Editor, Input, List, Number, Password, Question

logger = logging.getLogger(__name__)

QuestionCallback = Callable[[Question | None], Any]
Engine = Callable[[Sequence[dict[str, Any]]], Awaitable[Mapping[str, Any]]]


class Factory:
    """Named registry of the questions making up one prompt session.

    Each constructor returns the factory so registrations can be chained::

        factory = Factory()
        factory.input("user name", "Who are you?", Factory.validate_empty)
        factory.list("colour", "Pick one", lambda q: q.new_choices(["red", "blue"]))
        answers = await factory.answers()

    :meth:`answers` empties the registry, so one instance can drive several
    sessions in turn. Do not call it again on the same instance while a
    previous call is still being awaited.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or QuestionaryEngine()
        self._collection: dict[str, Question] = {}

    def __len__(self) -> int:
        return len(self._collection)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_question(name)

    def __iter__(self) -> Iterator[Question]:
        return iter(list(self._collection.values()))

    def _add_question(
        self,
        question: Question,
        message: str | QuestionCallback | None,
        callback: QuestionCallback | None,
    ) -> Factory:
        if question.name in self._collection:
            logger.debug("Replacing question %r", question.name)
        else:
            logger.debug("Registering %s question %r", question.type, question.name)
        self._collection[question.name] = question

        if message is None and callback is None:
            return self

        if callback is None:
            if isinstance(message, str):
                question.message(message)
            elif callable(message):
                message(question)
            else:
                raise TypeError(
                    f"Expected a message or a callback, received {type(message).__name__}"
                )
            return self

        if message is not None:
            question.message(message)
        callback(question)
        return self

    def clear(self) -> Factory:
        logger.debug("Clearing %d question(s)", len(self._collection))
        self._collection = {}
        return self

    def has_question(self, name: str) -> bool:
        return camel_case(name) in self._collection

    def get_question(self, name: str, callback: QuestionCallback) -> Factory:
        """Pass the named question, or ``None`` when there is none, to ``callback``."""
        callback(self._collection.get(camel_case(name)))
        return self

    def remove_question(self, name: str) -> Factory:
        self._collection.pop(camel_case(name), None)
        return self

    def input(
        self,
        name: str,
        message: str | QuestionCallback | None = None,
        callback: QuestionCallback | None = None,
    ) -> Factory:
        """Register a text input question.

        A string second argument becomes the message. A callable second
        argument is treated as the callback and no message is set. With both,
        the message is applied before the callback runs.
        """
        return self._add_question(Input(name), message, callback)

    def password(
        self,
        name: str,
        message: str | QuestionCallback | None = None,
        callback: QuestionCallback | None = None,
    ) -> Factory:
        return self._add_question(Password(name), message, callback)

    def editor(
        self,
        name: str,
        message: str | QuestionCallback | None = None,
        callback: QuestionCallback | None = None,
    ) -> Factory:
        return self._add_question(Editor(name), message, callback)

    def number(
        self,
        name: str,
        message: str | QuestionCallback | None = None,
        callback: QuestionCallback | None = None,
    ) -> Factory:
        return self._add_question(Number(name), message, callback)

    def list(
        self,
        name: str,
        message: str | QuestionCallback | None = None,
        callback: QuestionCallback | None = None,
    ) -> Factory:
        return self._add_question(List(name), message, callback)

    def checkbox(
        self,
        name: str,
        message: str | QuestionCallback | None = None,
        callback: QuestionCallback | None = None,
    ) -> Factory:
        return self._add_question(Checkbox(name), message, callback)

    @staticmethod
    def validate_empty(question: Question) -> Question:
        return question.validate_empty()

    @staticmethod
    def validate_email(question: Question) -> Question:
        return question.validate_email()

    @staticmethod
    def validate_only_numbers(question: Question) -> Question:
        return question.validate_only_numbers()

    def to_dict(self) -> list[dict[str, Any]]:
        return [question.to_dict() for question in self._collection.values()]

    def answers(self, engine: Engine | None = None) -> Awaitable[Mapping[str, Any]]:
        """Hand every registered question to the engine and empty the registry.

        The registry is cleared before the engine runs; the returned awaitable
        resolves to a mapping of question name to answer.
        """
        records = self.to_dict()
        self.clear()

        engine = engine or self._engine
        logger.debug("Collecting answers for %d question(s)", len(records))
        return engine(records)

    def ask(self, engine: Engine | None = None) -> dict[str, Any]:
        """Blocking variant of :meth:`answers` for code without an event loop."""

        async def _collect() -> Mapping[str, Any]:
            return await self.answers(engine)

        return dict(asyncio.run(_collect()))


__all__ = ["Engine", "Factory", "QuestionCallback"]
