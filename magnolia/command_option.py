"""Application command options and a validating builder for them."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union

import regex

from magnolia.locale import LocaleLike, locale_tag

__all__ = [
    "ValidationError",
    "CommandOptionType",
    "ChannelType",
    "CommandOptionChoice",
    "CommandOption",
    "CommandOptionBuilder",
]

DESCRIPTION_LENGTH = 100
CHOICE_COUNT = 25
OPTION_COUNT = 25
MAX_LENGTH = 6000
_U16_MAX = 0xFFFF

NAME_PATTERN = r"[-_'\p{L}\p{N}\p{Script=Devanagari}\p{Script=Thai}]{1,32}"
_NAME_REGEX = regex.compile(NAME_PATTERN)


class ValidationError(ValueError):
    """Raised when a built object breaks one of the API's rules."""


class CommandOptionType(IntEnum):
    """The kind of a command option."""

    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11


class ChannelType(IntEnum):
    """The kind of a channel."""

    GUILD_TEXT = 0
    PRIVATE = 1
    GUILD_VOICE = 2
    GROUP = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    ANNOUNCEMENT_THREAD = 10
    PUBLIC_THREAD = 11
    PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15
    GUILD_MEDIA = 16


ChoiceValue = Union[str, int, float]


@dataclass
class CommandOptionChoice:
    """A predefined value a user may pick for an option."""

    name: str
    value: ChoiceValue
    name_localizations: Optional[dict[str, str]] = None


@dataclass
class CommandOption:
    """An option of an application command."""

    name: str
    description: str
    kind: CommandOptionType
    autocomplete: Optional[bool] = None
    channel_types: Optional[list[ChannelType]] = None
    choices: Optional[list[CommandOptionChoice]] = None
    description_localizations: Optional[dict[str, str]] = None
    max_length: Optional[int] = None
    max_value: Optional[Union[int, float]] = None
    min_length: Optional[int] = None
    min_value: Optional[Union[int, float]] = None
    name_localizations: Optional[dict[str, str]] = None
    options: Optional[list[CommandOption]] = None
    required: Optional[bool] = None


_NESTING_KINDS = frozenset({CommandOptionType.SUB_COMMAND, CommandOptionType.SUB_COMMAND_GROUP})
_CHOICE_KINDS = frozenset(
    {CommandOptionType.STRING, CommandOptionType.INTEGER, CommandOptionType.NUMBER}
)
_VALUE_KINDS = frozenset({CommandOptionType.INTEGER, CommandOptionType.NUMBER})


def _localizations(localizations) -> dict[str, str]:
    pairs = localizations.items() if isinstance(localizations, Mapping) else localizations
    return {locale_tag(locale): str(text) for locale, text in pairs}


def _u16(value: int, what: str) -> int:
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{what} must be between 0 and {_U16_MAX}")
    return value


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class CommandOptionBuilder:
    """Fluent builder for a :class:`CommandOption`."""

    def __init__(self, name: str, description: str, kind: CommandOptionType) -> None:
        self._option = CommandOption(
            name=str(name), description=str(description), kind=CommandOptionType(kind)
        )

    def autocomplete(self, autocomplete: bool) -> CommandOptionBuilder:
        """Set whether the option uses autocomplete interactions."""
        self._option.autocomplete = bool(autocomplete)
        return self

    def channel_types(self, channel_types: Iterable[ChannelType]) -> CommandOptionBuilder:
        """Set the channel types shown for a channel option."""
        self._option.channel_types = [ChannelType(t) for t in channel_types]
        return self

    def choices(self, choices: Iterable[CommandOptionChoice]) -> CommandOptionBuilder:
        """Replace the option's choices."""
        self._option.choices = list(choices)
        return self

    def choice(self, choice: CommandOptionChoice) -> CommandOptionBuilder:
        """Add one choice to the option."""
        if self._option.choices is None:
            self._option.choices = []
        self._option.choices.append(choice)
        return self

    def description_localizations(self, localizations) -> CommandOptionBuilder:
        """Set the localized descriptions from (locale, text) pairs or a mapping."""
        self._option.description_localizations = _localizations(localizations)
        return self

    def name_localizations(self, localizations) -> CommandOptionBuilder:
        """Set the localized names from (locale, text) pairs or a mapping."""
        self._option.name_localizations = _localizations(localizations)
        return self

    def options(self, options: Iterable[CommandOption]) -> CommandOptionBuilder:
        """Replace the nested options."""
        self._option.options = list(options)
        return self

    def option(self, option: CommandOption) -> CommandOptionBuilder:
        """Add one nested option."""
        if self._option.options is None:
            self._option.options = []
        self._option.options.append(option)
        return self

    def max_length(self, max_length: int) -> CommandOptionBuilder:
        """Set the maximum input length."""
        self._option.max_length = _u16(max_length, "max_length")
        return self

    def min_length(self, min_length: int) -> CommandOptionBuilder:
        """Set the minimum input length."""
        self._option.min_length = _u16(min_length, "min_length")
        return self

    def required(self, required: bool) -> CommandOptionBuilder:
        """Set whether the option is required."""
        self._option.required = bool(required)
        return self

    def validate(self) -> None:
        """Check the option against the API's rules, raising :class:`ValidationError`."""
        opt = self._option
        kind = opt.kind

        if not _NAME_REGEX.fullmatch(opt.name):
            raise ValidationError(f"Name must match the regex pattern: {NAME_PATTERN}")

        for locale, name in (opt.name_localizations or {}).items():
            if not _NAME_REGEX.fullmatch(name):
                raise ValidationError(
                    f"Name localization for {locale} must match the regex pattern: {NAME_PATTERN}"
                )

        if not opt.description:
            raise ValidationError("Description must not be empty")
        if _byte_len(opt.description) > DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Description must not exceed {DESCRIPTION_LENGTH} characters"
            )

        for locale, description in (opt.description_localizations or {}).items():
            if not description:
                raise ValidationError(f"Description localization for {locale} must not be empty")
            if _byte_len(description) > DESCRIPTION_LENGTH:
                raise ValidationError(
                    f"Description localization for {locale} must not exceed "
                    f"{DESCRIPTION_LENGTH} characters"
                )

        if opt.required is not None and kind in _NESTING_KINDS:
            raise ValidationError("'required' is not supported for this option type")

        if opt.choices is not None:
            if kind not in _CHOICE_KINDS:
                raise ValidationError("'choices' is not supported for this option type")
            if len(opt.choices) > CHOICE_COUNT:
                raise ValidationError(f"Option must not have more than {CHOICE_COUNT} choices")

        if opt.options is not None:
            if kind not in _NESTING_KINDS:
                raise ValidationError("'options' is not supported for this option type")
            if len(opt.options) > OPTION_COUNT:
                raise ValidationError(f"Option must not have more than {OPTION_COUNT} options")
            for child in opt.options:
                if child.kind is CommandOptionType.SUB_COMMAND_GROUP:
                    raise ValidationError("Option must not have SUB_COMMAND_GROUP as a child")
                if (
                    child.kind is CommandOptionType.SUB_COMMAND
                    and kind is not CommandOptionType.SUB_COMMAND_GROUP
                ):
                    raise ValidationError(
                        "Option must not have SUB_COMMAND as a child of a group"
                    )

        if opt.channel_types is not None and kind is not CommandOptionType.CHANNEL:
            raise ValidationError("'channel_types' is not supported for this option type")

        if opt.min_value is not None and kind not in _VALUE_KINDS:
            raise ValidationError("'min_value' is not supported for this option type")

        if opt.max_value is not None and kind not in _VALUE_KINDS:
            raise ValidationError("'max_value' is not supported for this option type")

        if opt.max_length is not None:
            if kind is not CommandOptionType.STRING:
                raise ValidationError("'max_length' is not supported for this option type")
            if opt.max_length > MAX_LENGTH:
                raise ValidationError(f"Max length must not exceed {MAX_LENGTH} characters")

        if opt.min_length is not None:
            if kind is not CommandOptionType.STRING:
                raise ValidationError("'min_length' is not supported for this option type")
            if opt.min_length > MAX_LENGTH:
                raise ValidationError(f"Min length must not exceed {MAX_LENGTH} characters")

        if (
            opt.min_length is not None
            and opt.max_length is not None
            and opt.min_length > opt.max_length
        ):
            raise ValidationError("Min length must not be greater than max length")

        if opt.autocomplete is not None:
            if kind not in _CHOICE_KINDS:
                raise ValidationError("'autocomplete' is not supported for this option type")
            if opt.choices is not None:
                raise ValidationError("'autocomplete' is not supported with 'choices'")

    def build(self) -> CommandOption:
        """Validate and return the option."""
        try:
            self.validate()
        except ValidationError as err:
            raise ValidationError(f"validate command option: {err}") from err
        return copy.deepcopy(self._option)

    def build_unchecked(self) -> CommandOption:
        """Return the option without validating it."""
        return copy.deepcopy(self._option)