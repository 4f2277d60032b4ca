"""Configuration module."""

from educonsole.config.settings import ConsoleSettings

__all__ = ["ConsoleSettings"]
