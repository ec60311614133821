"""Chat collaborator core: messages, platform adapters, safety, tools, triggers and plugins."""

__version__ = "0.1.0"