"""
Guild and member lookups.

Wraps the discord.py calls the server and userinfo commands need behind two
functions returning plain models. The gateway cache is tried first; REST is
used on a cache miss. Every failure surfaces as DirectoryError.
"""

from __future__ import annotations

import asyncio

import aiohttp
import discord
from pydantic import BaseModel, ConfigDict, Field

THUMBNAIL_SIZE = 256

# What a REST call can raise: API errors plus connection resets and timeouts
# that discord.py lets through from aiohttp
TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (
    discord.HTTPException,
    aiohttp.ClientError,
    asyncio.TimeoutError,
    OSError,
)


class DirectoryError(Exception):
    """Raised when a guild or member cannot be looked up."""


class GuildInfo(BaseModel):
    """Guild metadata shown by the server command."""

    id: int
    name: str
    icon_url: str | None = Field(None, description="Icon URL, None if the guild has no icon")
    owner_id: int | None = None
    member_count: int = Field(0, ge=0)
    channel_count: int = Field(0, ge=0)
    role_count: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)


class MemberInfo(BaseModel):
    """Guild membership record shown by the userinfo command."""

    user_id: int
    tag: str = Field(description="Username, with #discriminator for legacy accounts")
    nickname: str | None = Field(None, description="Guild nickname, None if unset")
    role_count: int = Field(0, ge=0, description="Roles held, excluding @everyone")
    avatar_url: str | None = None

    model_config = ConfigDict(frozen=True)


async def _resolve_guild(
    client: discord.Client, guild_id: int | None, *, with_counts: bool = False
) -> tuple[discord.Guild, bool]:
    """Return (guild, cached) for ``guild_id``."""
    if guild_id is None:
        raise DirectoryError("Message was not sent in a guild")

    guild = client.get_guild(guild_id)
    if guild is not None:
        return guild, True

    try:
        guild = await client.fetch_guild(guild_id, with_counts=with_counts)
    except TRANSPORT_ERRORS as e:
        raise DirectoryError(f"Could not fetch guild {guild_id}: {e}") from e
    return guild, False


async def fetch_guild_info(client: discord.Client, guild_id: int | None) -> GuildInfo:
    """
    Look up guild metadata.

    Args:
        client: Connected discord.py client
        guild_id: Guild to look up (None for direct messages)

    Returns:
        GuildInfo for the guild

    Raises:
        DirectoryError: If the guild cannot be resolved
    """
    guild, cached = await _resolve_guild(client, guild_id, with_counts=True)

    if cached:
        channel_count = len(guild.channels)
        member_count = guild.member_count
    else:
        # Guilds fetched over REST carry no channel list
        try:
            channels = await guild.fetch_channels()
        except TRANSPORT_ERRORS as e:
            raise DirectoryError(f"Could not fetch channels for guild {guild_id}: {e}") from e
        channel_count = len(channels)
        member_count = guild.approximate_member_count

    return GuildInfo(
        id=guild.id,
        name=guild.name,
        icon_url=guild.icon.with_size(THUMBNAIL_SIZE).url if guild.icon else None,
        owner_id=guild.owner_id,
        member_count=member_count or 0,
        channel_count=channel_count,
        role_count=len(guild.roles),
    )


async def fetch_member_info(
    client: discord.Client, guild_id: int | None, user_id: int
) -> MemberInfo:
    """
    Look up a user's membership in a guild.

    Args:
        client: Connected discord.py client
        guild_id: Guild to look in (None for direct messages)
        user_id: User to look up

    Returns:
        MemberInfo for the member

    Raises:
        DirectoryError: If the guild or member cannot be resolved
    """
    guild, _ = await _resolve_guild(client, guild_id)

    member = guild.get_member(user_id)
    if member is None:
        try:
            member = await guild.fetch_member(user_id)
        except TRANSPORT_ERRORS as e:
            raise DirectoryError(
                f"Could not fetch member {user_id} in guild {guild_id}: {e}"
            ) from e

    avatar = member.avatar or member.default_avatar
    return MemberInfo(
        user_id=member.id,
        tag=str(member),
        nickname=member.nick or None,
        # Member.roles always starts with the implicit @everyone role
        role_count=len(member.roles[1:]),
        avatar_url=avatar.with_size(THUMBNAIL_SIZE).url,
    )
