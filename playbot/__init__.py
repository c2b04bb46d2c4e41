"""
Playbot - a small prefix-command Discord bot.

Answers a fixed set of text commands (ping, help, info, server, userinfo)
with plain-text or embed replies.
"""

__version__ = "0.1.0"
