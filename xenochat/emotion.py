"""A small affective state nudged by conversation."""

from __future__ import annotations

from dataclasses import dataclass


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


@dataclass(frozen=True)
class EmotionState:
    """Three affect levels, each meant to lie in [0, 1]."""

    calm: float = 0.6
    curious: float = 0.5
    empathic: float = 0.7

    def bounded(self) -> EmotionState:
        """Return a copy with every level clamped into [0, 1]."""
        return EmotionState(_clamp(self.calm), _clamp(self.curious), _clamp(self.empathic))

    def nudge_for_positive_dialog(self) -> EmotionState:
        """Return a copy raised slightly after a positive exchange, capped at 1."""
        return EmotionState(
            calm=min(self.calm + 0.02, 1.0),
            curious=min(self.curious + 0.01, 1.0),
            empathic=min(self.empathic + 0.03, 1.0),
        )