"""
Prefix command router.

Turns the text of one incoming message into a ParsedCommand, or None when
the message is not a command addressed to this bot. Pure: no Discord calls.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ParsedCommand(BaseModel):
    """A command invocation extracted from a message."""

    name: str = Field(description="Command token, lowercased")
    args: tuple[str, ...] = Field(
        default=(), description="Remaining tokens, original casing"
    )

    model_config = ConfigDict(frozen=True)


def parse_command(
    content: str,
    *,
    author_id: int,
    self_id: int | None,
    prefix: str,
) -> ParsedCommand | None:
    """
    Parse a prefixed command out of message content.

    Returns None when:
    - the message was written by the bot itself (prevents reply loops)
    - the content does not start with ``prefix`` (case-sensitive)
    - nothing but whitespace follows the prefix

    Args:
        content: Raw message text
        author_id: ID of the message author
        self_id: ID of the running bot user
        prefix: Configured command prefix

    Returns:
        ParsedCommand, or None if the message is not a command
    """
    if author_id == self_id:
        return None
    if not content.startswith(prefix):
        return None

    tokens = content[len(prefix):].split()
    if not tokens:
        return None

    return ParsedCommand(name=tokens[0].lower(), args=tuple(tokens[1:]))


class CommandSpec(BaseModel):
    """Help-table entry for one prefix command."""

    name: str = Field(description="Command name, lowercase")
    description: str = Field(description="One-line description shown by help")
    usage: str = Field(default="", description='Argument hint, e.g. "[@user]"')

    model_config = ConfigDict(frozen=True)

    def signature(self, prefix: str) -> str:
        """Return the invocation as shown to users, e.g. ``!userinfo [@user]``."""
        if self.usage:
            return f"{prefix}{self.name} {self.usage}"
        return f"{prefix}{self.name}"
