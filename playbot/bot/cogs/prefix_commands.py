"""
PrefixCommandsCog — text commands triggered by the configured prefix.

Every message passes through the on_message listener:

    message → parse_command() → command table → handler → channel.send()

The command table is built from the methods decorated with @prefix_command,
in definition order, and the help embed is rendered from that same table.
Names that are not in the table get a plain-text "unknown command" reply.
Handlers keep no state between messages; send failures are logged and
dropped, lookup failures become a plain-text error reply.
"""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

import discord
from discord.ext import commands

from playbot.bot import embeds
from playbot.bot.directory import (
    TRANSPORT_ERRORS,
    DirectoryError,
    fetch_guild_info,
    fetch_member_info,
)
from playbot.bot.router import CommandSpec, ParsedCommand, parse_command
from playbot.config.logging import get_logger
from playbot.config.settings import BotConfig

logger = get_logger(__name__)

Handler = Callable[[discord.Message, ParsedCommand], Awaitable[None]]


def prefix_command(name: str, description: str, usage: str = ""):
    """Register a cog method as the handler for ``<prefix><name>``."""
    spec = CommandSpec(name=name, description=description, usage=usage)

    def decorator(func):
        func.__prefix_command__ = spec
        return func

    return decorator


class PrefixCommandsCog(commands.Cog):
    """Routes prefixed messages to the ping/help/info/server/userinfo handlers."""

    def __init__(self, bot: commands.Bot, config: BotConfig) -> None:
        self.bot = bot
        self.config = config
        self._handlers: dict[str, Handler] = {}
        self._specs: list[CommandSpec] = []
        for attr_name, attr in type(self).__dict__.items():
            spec = getattr(attr, "__prefix_command__", None)
            if spec is None:
                continue
            self._specs.append(spec)
            self._handlers[spec.name] = getattr(self, attr_name)

    @property
    def command_specs(self) -> tuple[CommandSpec, ...]:
        """Registered commands, in the order help lists them."""
        return tuple(self._specs)

    # ------------------------------------------------------------------
    # Router
    # ------------------------------------------------------------------

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        bot_user = self.bot.user
        command = parse_command(
            message.content,
            author_id=message.author.id,
            self_id=bot_user.id if bot_user else None,
            prefix=self.config.prefix,
        )
        if command is None:
            return

        logger.debug(
            f"Command {command.name!r} args={list(command.args)} "
            f"from {message.author.id} in channel {message.channel.id}"
        )
        handler = self._handlers.get(command.name, self.unknown_command)
        await handler(message, command)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    @prefix_command("ping", "Check the bot's latency")
    async def ping(self, message: discord.Message, command: ParsedCommand) -> None:
        # Round trip of our own send, not the gateway heartbeat latency
        start = time.perf_counter()
        sent = await self._send(message.channel, "Pinging...")
        if sent is None:
            return
        latency_ms = int((time.perf_counter() - start) * 1000)

        try:
            await sent.edit(content=f"🏓 Pong! Latency: {latency_ms}ms")
        except TRANSPORT_ERRORS as e:
            logger.warning(f"Failed to edit ping reply {sent.id}: {e}")

    @prefix_command("help", "Show this help message")
    async def help(self, message: discord.Message, command: ParsedCommand) -> None:
        await self._send(
            message.channel, embed=embeds.help_embed(self.config.prefix, self._specs)
        )

    @prefix_command("info", "Display information about the bot")
    async def info(self, message: discord.Message, command: ParsedCommand) -> None:
        await self._send(message.channel, embed=embeds.info_embed(self.config.prefix))

    @prefix_command("server", "Show information about the current server")
    async def server(self, message: discord.Message, command: ParsedCommand) -> None:
        guild_id = message.guild.id if message.guild else None
        try:
            guild = await fetch_guild_info(self.bot, guild_id)
        except DirectoryError as e:
            logger.warning(f"Server lookup failed: {e}")
            await self._send(message.channel, "Error retrieving server information.")
            return

        await self._send(message.channel, embed=embeds.server_embed(guild))

    @prefix_command(
        "userinfo", "Show information about yourself or a mentioned user", usage="[@user]"
    )
    async def userinfo(self, message: discord.Message, command: ParsedCommand) -> None:
        # Only the first mention counts; arguments are not otherwise inspected
        target = message.mentions[0] if message.mentions else message.author
        guild_id = message.guild.id if message.guild else None
        try:
            member = await fetch_member_info(self.bot, guild_id, target.id)
        except DirectoryError as e:
            logger.warning(f"User lookup failed for {target.id}: {e}")
            await self._send(message.channel, "Error retrieving user information.")
            return

        await self._send(message.channel, embed=embeds.userinfo_embed(member))

    async def unknown_command(self, message: discord.Message, command: ParsedCommand) -> None:
        """Fallback for names missing from the command table."""
        prefix = self.config.prefix
        await self._send(
            message.channel,
            f"Unknown command: `{command.name}`. Use `{prefix}help` to see available commands.",
        )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _send(
        self,
        channel: discord.abc.Messageable,
        content: str | None = None,
        *,
        embed: discord.Embed | None = None,
    ) -> discord.Message | None:
        """
        Send text or an embed, returning the sent message.

        Returns None instead of raising when Discord rejects the send or the
        connection fails, so a failed reply never escapes the handler.
        """
        try:
            if embed is not None:
                return await channel.send(embed=embed)
            return await channel.send(content)
        except TRANSPORT_ERRORS as e:
            logger.warning(f"Failed to send reply to channel {getattr(channel, 'id', '?')}: {e}")
            return None
