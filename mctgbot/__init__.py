"""Telegram bot, Bot API client and event types for a Minecraft chat relay."""

__version__ = "0.1.0"