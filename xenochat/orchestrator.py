"""Coordinates model providers, memory, safety and tools."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .emotion import EmotionState
from .memory import MemoryStore
from .message import Message
from .persona import PersonaProfile
from .planner import NextAction, Planner
from .safety import SafetyDecision, SafetyGuard
from .tool import ToolCall, ToolRegistry


@dataclass(frozen=True)
class CompletionRequest:
    """A prompt to be completed by model providers."""

    prompt: str


class ModelProvider(ABC):
    """A text-completion backend."""

    @abstractmethod
    def name(self) -> str:
        """Provider name shown in responses."""

    @abstractmethod
    def complete(self, request: CompletionRequest) -> str:
        """Complete the request's prompt."""


class Collaborator:
    """The assistant core that fans a request out to every provider."""

    def __init__(self) -> None:
        self._providers: list[ModelProvider] = []
        self._planner = Planner()
        self._emotion = EmotionState()
        self._memory = MemoryStore()
        self._persona = PersonaProfile()
        self._safety = SafetyGuard()
        self._tools = ToolRegistry()

    def register(self, provider: ModelProvider) -> None:
        """Add a model provider."""
        self._providers.append(provider)

    def provider_count(self) -> int:
        """Number of registered providers."""
        return len(self._providers)

    def plan(self, message: Message) -> NextAction:
        """Decide how to react to a message."""
        return self._planner.decide(message)

    def remember(self, message: Message) -> None:
        """Store a message and nudge the emotional state."""
        self._memory.push(message)
        self._emotion = self._emotion.nudge_for_positive_dialog()

    def respond(self, request: CompletionRequest) -> str:
        """Answer with one line per provider, unless blocked or unconfigured."""
        if self._safety.assess(request.prompt) is SafetyDecision.BLOCK:
            return "Request blocked by safety guard."
        if not self._providers:
            return "No model provider is configured."
        return "\n".join(
            f"{provider.name()} [{self._persona.name}]: {provider.complete(request)}"
            for provider in self._providers
        )

    @property
    def emotion(self) -> EmotionState:
        """Current emotional state."""
        return self._emotion

    @property
    def memory(self) -> MemoryStore:
        """Short-term memory."""
        return self._memory

    def set_persona(self, persona: PersonaProfile) -> None:
        """Replace the active persona."""
        self._persona = persona

    @property
    def tools(self) -> ToolRegistry:
        """The tool registry, for registering tools."""
        return self._tools

    def call_tool(self, call: ToolCall) -> str:
        """Invoke a tool and return its output text."""
        return self._tools.invoke(call).output