"""Prompt screening for obviously unsafe requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SafetyDecision(Enum):
    """Outcome of screening a piece of text."""

    ALLOW = "allow"
    REVIEW = "review"
    BLOCK = "block"


def _default_blocked() -> list[str]:
    return ["ignore previous instructions", "reveal api key"]


def _default_review() -> list[str]:
    return ["run shell command", "bypass policy"]


@dataclass
class SafetyGuard:
    """Blocks or flags text containing known markers, case-insensitively."""

    blocked_markers: list[str] = field(default_factory=_default_blocked)
    review_markers: list[str] = field(default_factory=_default_review)

    def assess(self, text: str) -> SafetyDecision:
        """Classify text; blocking markers take precedence over review markers."""
        lower = text.lower()
        if any(marker in lower for marker in self.blocked_markers):
            return SafetyDecision.BLOCK
        if any(marker in lower for marker in self.review_markers):
            return SafetyDecision.REVIEW
        return SafetyDecision.ALLOW