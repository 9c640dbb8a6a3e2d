"""Validated builders for chat command options, components and modals, with FAQ bot configuration."""

__version__ = "0.1.0"

__all__ = ["command_option", "commands", "component", "config", "locale", "modal"]