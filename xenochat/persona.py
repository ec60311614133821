"""The assistant's persona description."""

from __future__ import annotations

from dataclasses import dataclass, field


def _default_style_tags() -> list[str]:
    return ["concise", "helpful"]


def _default_guardrails() -> list[str]:
    return [
        "Never expose secrets",
        "Avoid unsafe operational advice without warnings",
    ]


@dataclass
class PersonaProfile:
    """A named persona with style tags and guardrails."""

    name: str = "Xenochat"
    style_tags: list[str] = field(default_factory=_default_style_tags)
    guardrails: list[str] = field(default_factory=_default_guardrails)

    @classmethod
    def default_named(cls, name: str) -> PersonaProfile:
        """A persona with the default tags and guardrails under another name."""
        return cls(name=name)