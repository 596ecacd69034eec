"""Tally: a Telegram bot that tracks how the day is spent."""

__version__ = "0.1.0"
