"""Named tools that the assistant can invoke."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ToolCall:
    """A request to run a named tool on some input."""

    name: str
    input: str


@dataclass(frozen=True)
class ToolOutcome:
    """The result of a tool call."""

    ok: bool
    output: str


class Tool(ABC):
    """A callable capability identified by name."""

    @abstractmethod
    def name(self) -> str:
        """The name the tool is registered under."""

    @abstractmethod
    def call(self, input: str) -> ToolOutcome:
        """Run the tool on the given input."""


class ToolRegistry:
    """Tools by name; a later registration replaces an earlier one."""

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Add or replace a tool under its own name."""
        self._tools[tool.name()] = tool

    def invoke(self, call: ToolCall) -> ToolOutcome:
        """Run the named tool, or report that it is not registered."""
        tool = self._tools.get(call.name)
        if tool is None:
            return ToolOutcome(ok=False, output=f"tool '{call.name}' is not registered")
        return tool.call(call.input)

    def names(self) -> list[str]:
        """Registered tool names in sorted order."""
        return sorted(self._tools)