"""taskbot: a console task-tracking chat-bot with a flat text save file."""

__version__ = "0.1.0"
