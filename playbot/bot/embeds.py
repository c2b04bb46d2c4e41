"""
Embed builders for command replies.

Pure functions: each takes already-resolved data and returns a discord.Embed.
"""

from __future__ import annotations

from collections.abc import Iterable

import discord

from playbot.bot.directory import GuildInfo, MemberInfo
from playbot.bot.router import CommandSpec

REPOSITORY_URL = "https://github.com/riyanimam/discord-bot-playground"

HELP_COLOR = discord.Color(0x00FF00)
INFO_COLOR = discord.Color(0x0099FF)
SERVER_COLOR = discord.Color(0xFFA500)
USERINFO_COLOR = discord.Color(0x9B59B6)


def help_embed(prefix: str, commands: Iterable[CommandSpec]) -> discord.Embed:
    """List every registered command, one field each."""
    embed = discord.Embed(
        title="📚 Bot Commands",
        description=f"Here are all the commands you can use (prefix: `{prefix}`):",
        color=HELP_COLOR,
        timestamp=discord.utils.utcnow(),
    )
    for spec in commands:
        embed.add_field(name=spec.signature(prefix), value=spec.description, inline=False)
    return embed


def info_embed(prefix: str) -> discord.Embed:
    """Describe the bot itself and the configured prefix."""
    embed = discord.Embed(
        title="ℹ️ Bot Information",
        description=f"A simple Discord bot written in Python! Use `{prefix}help` for commands.",
        color=INFO_COLOR,
        timestamp=discord.utils.utcnow(),
    )
    embed.add_field(name="Language", value="Python", inline=True)
    embed.add_field(name="Library", value="discord.py", inline=True)
    embed.add_field(name="Prefix", value=f"`{prefix}`", inline=True)
    embed.add_field(name="Repository", value=f"[GitHub]({REPOSITORY_URL})", inline=False)
    embed.set_footer(text="Made with ❤️ using Python")
    return embed


def server_embed(guild: GuildInfo) -> discord.Embed:
    """Summarise a guild: owner, member, channel and role counts."""
    embed = discord.Embed(
        title=f"🏰 {guild.name}",
        description="Server Information",
        color=SERVER_COLOR,
        timestamp=discord.utils.utcnow(),
    )
    if guild.icon_url:
        embed.set_thumbnail(url=guild.icon_url)
    embed.add_field(name="Server ID", value=str(guild.id), inline=True)
    embed.add_field(
        name="Owner",
        value=f"<@{guild.owner_id}>" if guild.owner_id else "Unknown",
        inline=True,
    )
    embed.add_field(name="Members", value=str(guild.member_count), inline=True)
    embed.add_field(name="Channels", value=str(guild.channel_count), inline=True)
    embed.add_field(name="Roles", value=str(guild.role_count), inline=True)
    return embed


def userinfo_embed(member: MemberInfo) -> discord.Embed:
    """Summarise one guild member: ID, nickname and role count."""
    embed = discord.Embed(
        title=f"👤 {member.tag}",
        description="User Information",
        color=USERINFO_COLOR,
        timestamp=discord.utils.utcnow(),
    )
    if member.avatar_url:
        embed.set_thumbnail(url=member.avatar_url)
    embed.add_field(name="User ID", value=str(member.user_id), inline=True)
    embed.add_field(name="Nickname", value=member.nickname or "None", inline=True)
    embed.add_field(name="Roles", value=str(member.role_count), inline=True)
    return embed
