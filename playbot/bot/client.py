"""
PlaybotBot — discord.py bot client.

Manages the bot lifecycle:
- Loads PrefixCommandsCog with the immutable BotConfig
- Sets the "<prefix>help for commands" presence once connected
- Closes the gateway connection on shutdown
"""

from __future__ import annotations

import discord
from discord.ext import commands

from playbot.bot.directory import TRANSPORT_ERRORS
from playbot.config.logging import get_logger
from playbot.config.settings import BotConfig

logger = get_logger(__name__)


class PlaybotBot(commands.Bot):
    """
    Discord bot answering prefix commands.

    Prefix parsing is done by PrefixCommandsCog's router rather than by
    discord.ext.commands, so the built-in command processor and help
    command are disabled.

    Args:
        config: Immutable bot configuration (token, prefix)
    """

    def __init__(self, config: BotConfig) -> None:
        intents = discord.Intents.default()
        intents.message_content = True  # Required to read command text
        super().__init__(
            command_prefix=config.prefix,
            intents=intents,
            help_command=None,
        )
        self.config = config

    async def setup_hook(self) -> None:
        """Called after login, before connecting to the Gateway."""
        from playbot.bot.cogs.prefix_commands import PrefixCommandsCog

        await self.add_cog(PrefixCommandsCog(self, self.config))
        logger.info("Cogs loaded")

    async def on_message(self, message: discord.Message) -> None:
        """Commands are dispatched by PrefixCommandsCog's listener only."""

    async def on_ready(self) -> None:
        """Called when the bot successfully connects to Discord."""
        logger.info(f"Logged in as {self.user} (id: {self.user.id})")
        logger.info(f"Connected to {len(self.guilds)} guild(s)")

        try:
            await self.change_presence(
                activity=discord.Game(name=f"{self.config.prefix}help for commands")
            )
        except (discord.DiscordException, *TRANSPORT_ERRORS) as e:
            logger.warning(f"Could not set presence: {e}")

    async def close(self) -> None:
        """Graceful shutdown — release the gateway connection."""
        logger.info("Shutting down Playbot...")
        await super().close()
