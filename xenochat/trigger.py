"""Keyword triggers that map input text to canned responses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeywordRule:
    """A pattern and the response it triggers."""

    pattern: str
    response_template: str


class KeywordTrigger:
    """Matches text against registered patterns in registration order."""

    def __init__(self) -> None:
        self._rules: list[KeywordRule] = []

    def register(self, pattern: str, response: str) -> None:
        """Add a rule; earlier rules win when several match."""
        self._rules.append(KeywordRule(pattern, response))

    def check(self, input: str) -> KeywordRule | None:
        """Return the first rule whose pattern occurs in the input, ignoring case."""
        lower = input.lower()
        return next((rule for rule in self._rules if rule.pattern.lower() in lower), None)

    def count(self) -> int:
        """Number of registered rules."""
        return len(self._rules)