"""Application commands: the config file command and the FAQ command."""

from __future__ import annotations

import copy
from enum import Enum
from typing import Optional

from magnolia.command_option import (
    CommandOption,
    CommandOptionBuilder,
    CommandOptionChoice,
    CommandOptionType,
)
from magnolia.config import Config
from magnolia.modal import (
    InteractionResponse,
    InteractionResponseData,
    InteractionResponseType,
)

__all__ = [
    "QUERY_OPTION_NAME",
    "MENTION_OPTION_NAME",
    "FileType",
    "config_file_type_option",
    "faq_options",
    "with_mention",
    "faq_response",
]

QUERY_OPTION_NAME = "query"
MENTION_OPTION_NAME = "mention"


class FileType(str, Enum):
    """The form in which the config command sends the configuration."""

    RUST = "Rust"
    YAML = "YAML"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> FileType:
        """Return the file type named by ``text``; raise ValueError otherwise."""
        for member in cls:
            if member.value == text:
                return member
        raise ValueError("Invalid file type")


def config_file_type_option() -> CommandOption:
    """Build the required ``file_type`` option of the config command."""
    choices = [CommandOptionChoice(name=ft.value, value=str(ft)) for ft in FileType]
    return (
        CommandOptionBuilder("file_type", "The type of file to send", CommandOptionType.STRING)
        .required(True)
        .choices(choices)
        .build()
    )


def faq_options(config: Config) -> list[CommandOption]:
    """Build the query and mention options of the FAQ command."""
    query = (
        CommandOptionBuilder(
            QUERY_OPTION_NAME, "The response to send.", CommandOptionType.STRING
        )
        .choices(config.faq_option_choices())
        .required(True)
        .build()
    )
    mention = CommandOptionBuilder(
        MENTION_OPTION_NAME, "The user to mention in the response.", CommandOptionType.USER
    ).build()
    return [query, mention]


def with_mention(response: InteractionResponseData, user_id: int) -> InteractionResponseData:
    """Return a copy of the response with a mention of the user put in front."""
    mentioned = copy.deepcopy(response)
    tag = f"<@{int(user_id)}>"
    mentioned.content = tag if response.content is None else f"{tag} {response.content}"
    return mentioned


def faq_response(
    config: Config, query: str, mention: Optional[int] = None
) -> InteractionResponse:
    """Build the FAQ reply for a query, optionally mentioning a user."""
    data = config.faq_option_response(query)
    if data is None:
        raise ValueError(f"unknown query option: {query}")
    if mention is not None:
        data = with_mention(data, mention)
    return InteractionResponse(
        kind=InteractionResponseType.CHANNEL_MESSAGE_WITH_SOURCE, data=data
    )