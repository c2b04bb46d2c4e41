"""
Tests for the embed builders.

The builders are pure, so these check titles, colors, and field content
directly on the returned discord.Embed.
"""

import discord

from playbot.bot import embeds
from playbot.bot.directory import GuildInfo, MemberInfo
from playbot.bot.router import CommandSpec

SPECS = [
    CommandSpec(name="ping", description="Check the bot's latency"),
    CommandSpec(name="help", description="Show this help message"),
    CommandSpec(name="userinfo", description="Show a user", usage="[@user]"),
]


def _fields(embed: discord.Embed) -> dict:
    return {f.name: f for f in embed.fields}


class TestHelpEmbed:
    def test_one_field_per_command_with_configured_prefix(self):
        embed = embeds.help_embed("?", SPECS)
        names = [f.name for f in embed.fields]
        assert names == ["?ping", "?help", "?userinfo [@user]"]

    def test_default_prefix_never_leaks_into_custom_prefix(self):
        embed = embeds.help_embed("?", SPECS)
        text = embed.description + "".join(f.name for f in embed.fields)
        assert "?ping" in text
        assert "!ping" not in text
        assert "`?`" in embed.description

    def test_fields_are_not_inline_and_carry_descriptions(self):
        embed = embeds.help_embed("!", SPECS)
        field = _fields(embed)["!ping"]
        assert field.value == "Check the bot's latency"
        assert field.inline is False

    def test_style(self):
        embed = embeds.help_embed("!", SPECS)
        assert embed.title == "📚 Bot Commands"
        assert embed.color == discord.Color(0x00FF00)
        assert embed.timestamp is not None


class TestInfoEmbed:
    def test_static_fields(self):
        fields = _fields(embeds.info_embed("!"))
        assert fields["Language"].value == "Python"
        assert fields["Library"].value == "discord.py"
        assert embeds.REPOSITORY_URL in fields["Repository"].value
        assert fields["Repository"].inline is False

    def test_prefix_is_the_configured_one(self):
        embed = embeds.info_embed("?")
        assert _fields(embed)["Prefix"].value == "`?`"
        assert "?help" in embed.description
        assert "!" not in _fields(embed)["Prefix"].value

    def test_style(self):
        embed = embeds.info_embed("!")
        assert embed.title == "ℹ️ Bot Information"
        assert embed.color == discord.Color(0x0099FF)
        assert embed.footer.text == "Made with ❤️ using Python"
        assert embed.timestamp is not None


class TestServerEmbed:
    def _guild(self, **kwargs) -> GuildInfo:
        defaults = dict(
            id=42,
            name="Test Guild",
            icon_url="https://cdn.example/icon.png",
            owner_id=7,
            member_count=120,
            channel_count=9,
            role_count=4,
        )
        defaults.update(kwargs)
        return GuildInfo(**defaults)

    def test_fields(self):
        fields = _fields(embeds.server_embed(self._guild()))
        assert fields["Server ID"].value == "42"
        assert fields["Owner"].value == "<@7>"
        assert fields["Members"].value == "120"
        assert fields["Channels"].value == "9"
        assert fields["Roles"].value == "4"
        assert all(f.inline for f in fields.values())

    def test_title_thumbnail_and_color(self):
        embed = embeds.server_embed(self._guild())
        assert embed.title == "🏰 Test Guild"
        assert embed.description == "Server Information"
        assert embed.thumbnail.url == "https://cdn.example/icon.png"
        assert embed.color == discord.Color(0xFFA500)

    def test_no_thumbnail_without_icon(self):
        embed = embeds.server_embed(self._guild(icon_url=None))
        assert embed.thumbnail.url is None


class TestUserinfoEmbed:
    def _member(self, **kwargs) -> MemberInfo:
        defaults = dict(
            user_id=55,
            tag="alice",
            nickname="Ally",
            role_count=3,
            avatar_url="https://cdn.example/avatar.png",
        )
        defaults.update(kwargs)
        return MemberInfo(**defaults)

    def test_fields(self):
        fields = _fields(embeds.userinfo_embed(self._member()))
        assert fields["User ID"].value == "55"
        assert fields["Nickname"].value == "Ally"
        assert fields["Roles"].value == "3"

    def test_missing_nickname_shows_literal_none(self):
        fields = _fields(embeds.userinfo_embed(self._member(nickname=None)))
        assert fields["Nickname"].value == "None"

    def test_title_thumbnail_and_color(self):
        embed = embeds.userinfo_embed(self._member())
        assert embed.title == "👤 alice"
        assert embed.description == "User Information"
        assert embed.thumbnail.url == "https://cdn.example/avatar.png"
        assert embed.color == discord.Color(0x9B59B6)
