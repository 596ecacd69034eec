"""Telegram transport."""

from .bot import BotConfig, TelegramBot, sender_from_update, truncate_message

__all__ = ["BotConfig", "TelegramBot", "sender_from_update", "truncate_message"]
