"""
Discord Bot Layer.

Handles prefix parsing, command dispatch, directory lookups, and reply
formatting for the Playbot bot.
"""

from playbot.bot.client import PlaybotBot

__all__ = ["PlaybotBot"]
