"""Message components and builders for buttons, action rows and select menus."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Union

from magnolia.command_option import ChannelType, ValidationError

__all__ = [
    "ButtonStyle",
    "SelectMenuType",
    "TextInputStyle",
    "Emoji",
    "Button",
    "ActionRow",
    "SelectMenu",
    "SelectMenuOption",
    "TextInput",
    "Component",
    "ButtonBuilder",
    "ActionRowBuilder",
    "SelectMenuBuilder",
    "SelectMenuOptionBuilder",
    "validate_button",
    "validate_action_row",
    "validate_select_menu",
    "validate_text_input",
]

ACTION_ROW_COMPONENT_COUNT = 5
COMPONENT_CUSTOM_ID_LENGTH = 100
COMPONENT_BUTTON_LABEL_LENGTH = 80
SELECT_MAXIMUM_VALUES_LIMIT = 25
SELECT_MAXIMUM_VALUES_REQUIREMENT = 1
SELECT_MINIMUM_VALUES_LIMIT = 25
SELECT_OPTION_COUNT = 25
SELECT_OPTION_DESCRIPTION_LENGTH = 100
SELECT_OPTION_LABEL_LENGTH = 100
SELECT_OPTION_VALUE_LENGTH = 100
SELECT_PLACEHOLDER_LENGTH = 150
TEXT_INPUT_LABEL_MIN = 1
TEXT_INPUT_LABEL_MAX = 45
TEXT_INPUT_LENGTH_MIN = 1
TEXT_INPUT_LENGTH_MAX = 4000
TEXT_INPUT_PLACEHOLDER_MAX = 100

_U8_MAX = 0xFF
_U16_MAX = 0xFFFF


class ButtonStyle(IntEnum):
    """The look and behaviour of a button."""

    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5
    PREMIUM = 6


class SelectMenuType(IntEnum):
    """What a select menu offers to pick from."""

    TEXT = 3
    USER = 5
    ROLE = 6
    MENTIONABLE = 7
    CHANNEL = 8


class TextInputStyle(IntEnum):
    """Single-line or multi-line text input."""

    SHORT = 1
    PARAGRAPH = 2


@dataclass(frozen=True)
class Emoji:
    """A unicode emoji (name only) or a custom emoji (id, optional name)."""

    name: Optional[str] = None
    id: Optional[int] = None
    animated: bool = False


@dataclass
class Button:
    """A clickable button."""

    style: ButtonStyle
    custom_id: Optional[str] = None
    disabled: bool = False
    emoji: Optional[Emoji] = None
    label: Optional[str] = None
    url: Optional[str] = None
    sku_id: Optional[int] = None


@dataclass
class SelectMenuOption:
    """One entry of a text select menu."""

    label: str
    value: str
    default: bool = False
    description: Optional[str] = None
    emoji: Optional[Emoji] = None


@dataclass
class SelectMenu:
    """A dropdown menu."""

    custom_id: str
    kind: SelectMenuType
    channel_types: Optional[list[ChannelType]] = None
    disabled: bool = False
    options: Optional[list[SelectMenuOption]] = None
    placeholder: Optional[str] = None
    min_values: Optional[int] = None
    max_values: Optional[int] = None


@dataclass
class TextInput:
    """A text field shown in a modal."""

    custom_id: str
    label: str
    style: TextInputStyle
    max_length: Optional[int] = None
    min_length: Optional[int] = None
    placeholder: Optional[str] = None
    required: Optional[bool] = None
    value: Optional[str] = None


@dataclass
class ActionRow:
    """A row holding other components."""

    components: list = field(default_factory=list)


Component = Union[ActionRow, Button, SelectMenu, TextInput]


def _ranged(value: int, upper: int, what: str) -> int:
    value = int(value)
    if not 0 <= value <= upper:
        raise ValueError(f"{what} must be between 0 and {upper}")
    return value


def _check_custom_id(custom_id: str) -> None:
    if len(custom_id) > COMPONENT_CUSTOM_ID_LENGTH:
        raise ValidationError(
            f"custom id must not exceed {COMPONENT_CUSTOM_ID_LENGTH} characters"
        )


def validate_button(button: Button) -> None:
    """Check a button against the API's rules, raising :class:`ValidationError`."""
    has_custom_id = button.custom_id is not None
    has_emoji = button.emoji is not None
    has_label = button.label is not None
    has_sku_id = button.sku_id is not None
    has_url = button.url is not None
    style = button.style

    if has_custom_id and has_url:
        raise ValidationError("button must not have both a custom id and a url")
    if style is ButtonStyle.LINK and not has_url:
        raise ValidationError("link button must have a url")
    if style not in (ButtonStyle.LINK, ButtonStyle.PREMIUM) and not has_custom_id:
        raise ValidationError(f"{style.name.lower()} button must have a custom id")
    if style is ButtonStyle.PREMIUM and (
        not has_sku_id or has_custom_id or has_url or has_label or has_emoji
    ):
        raise ValidationError(
            "premium button must have only an sku id, without custom id, url, label or emoji"
        )
    if style is not ButtonStyle.PREMIUM and has_sku_id:
        raise ValidationError("only premium buttons may have an sku id")

    if button.custom_id is not None:
        _check_custom_id(button.custom_id)
    if button.label is not None and len(button.label) > COMPONENT_BUTTON_LABEL_LENGTH:
        raise ValidationError(
            f"button label must not exceed {COMPONENT_BUTTON_LABEL_LENGTH} characters"
        )


def validate_select_menu(select_menu: SelectMenu) -> None:
    """Check a select menu against the API's rules, raising :class:`ValidationError`."""
    if select_menu.kind is SelectMenuType.TEXT:
        if select_menu.options is None:
            raise ValidationError("text select menu must have options")
        for option in select_menu.options:
            if len(option.label) > SELECT_OPTION_LABEL_LENGTH:
                raise ValidationError(
                    f"select option label must not exceed {SELECT_OPTION_LABEL_LENGTH} characters"
                )
            if len(option.value) > SELECT_OPTION_VALUE_LENGTH:
                raise ValidationError(
                    f"select option value must not exceed {SELECT_OPTION_VALUE_LENGTH} characters"
                )
            if (
                option.description is not None
                and len(option.description) > SELECT_OPTION_DESCRIPTION_LENGTH
            ):
                raise ValidationError(
                    "select option description must not exceed "
                    f"{SELECT_OPTION_DESCRIPTION_LENGTH} characters"
                )
        if len(select_menu.options) > SELECT_OPTION_COUNT:
            raise ValidationError(
                f"select menu must not have more than {SELECT_OPTION_COUNT} options"
            )

    if (
        select_menu.placeholder is not None
        and len(select_menu.placeholder) > SELECT_PLACEHOLDER_LENGTH
    ):
        raise ValidationError(
            f"select placeholder must not exceed {SELECT_PLACEHOLDER_LENGTH} characters"
        )

    if select_menu.max_values is not None:
        if select_menu.max_values > SELECT_MAXIMUM_VALUES_LIMIT:
            raise ValidationError(
                f"select maximum values must not exceed {SELECT_MAXIMUM_VALUES_LIMIT}"
            )
        if select_menu.max_values < SELECT_MAXIMUM_VALUES_REQUIREMENT:
            raise ValidationError(
                f"select maximum values must be at least {SELECT_MAXIMUM_VALUES_REQUIREMENT}"
            )

    if (
        select_menu.min_values is not None
        and select_menu.min_values > SELECT_MINIMUM_VALUES_LIMIT
    ):
        raise ValidationError(
            f"select minimum values must not exceed {SELECT_MINIMUM_VALUES_LIMIT}"
        )

    _check_custom_id(select_menu.custom_id)


def validate_text_input(text_input: TextInput) -> None:
    """Check a text input against the API's rules, raising :class:`ValidationError`."""
    _check_custom_id(text_input.custom_id)

    if not TEXT_INPUT_LABEL_MIN <= len(text_input.label) <= TEXT_INPUT_LABEL_MAX:
        raise ValidationError(
            f"text input label must be between {TEXT_INPUT_LABEL_MIN} "
            f"and {TEXT_INPUT_LABEL_MAX} characters"
        )
    if text_input.max_length is not None and not (
        TEXT_INPUT_LENGTH_MIN <= text_input.max_length <= TEXT_INPUT_LENGTH_MAX
    ):
        raise ValidationError(
            f"text input max length must be between {TEXT_INPUT_LENGTH_MIN} "
            f"and {TEXT_INPUT_LENGTH_MAX}"
        )
    if text_input.min_length is not None and text_input.min_length > TEXT_INPUT_LENGTH_MAX:
        raise ValidationError(
            f"text input min length must not exceed {TEXT_INPUT_LENGTH_MAX}"
        )
    if (
        text_input.placeholder is not None
        and len(text_input.placeholder) > TEXT_INPUT_PLACEHOLDER_MAX
    ):
        raise ValidationError(
            f"text input placeholder must not exceed {TEXT_INPUT_PLACEHOLDER_MAX} characters"
        )
    if text_input.value is not None and len(text_input.value) > TEXT_INPUT_LENGTH_MAX:
        raise ValidationError(
            f"text input value must not exceed {TEXT_INPUT_LENGTH_MAX} characters"
        )


def validate_action_row(action_row: ActionRow) -> None:
    """Check an action row and every component in it, raising :class:`ValidationError`."""
    if len(action_row.components) > ACTION_ROW_COMPONENT_COUNT:
        raise ValidationError(
            f"action row must not have more than {ACTION_ROW_COMPONENT_COUNT} components"
        )
    for component in action_row.components:
        if isinstance(component, ActionRow):
            raise ValidationError("action row must not contain another action row")
        if isinstance(component, Button):
            validate_button(component)
        elif isinstance(component, SelectMenu):
            validate_select_menu(component)
        elif isinstance(component, TextInput):
            validate_text_input(component)
        else:
            raise ValidationError(
                f"unsupported component in action row: {type(component).__name__}"
            )


def _with_context(context: str, check, value) -> None:
    try:
        check(value)
    except ValidationError as err:
        raise ValidationError(f"{context}: {err}") from err


class ButtonBuilder:
    """Fluent builder for a :class:`Button`."""

    def __init__(self, custom_id: str, style: ButtonStyle) -> None:
        self._button = Button(style=ButtonStyle(style), custom_id=str(custom_id))

    def label(self, label: str) -> ButtonBuilder:
        """Set the button's label."""
        self._button.label = str(label)
        return self

    def disabled(self, disabled: bool) -> ButtonBuilder:
        """Set whether the button is disabled."""
        self._button.disabled = bool(disabled)
        return self

    def emoji(self, emoji: Emoji) -> ButtonBuilder:
        """Set the button's emoji icon."""
        self._button.emoji = emoji
        return self

    def url(self, url: str) -> ButtonBuilder:
        """Set the URL of a link button."""
        self._button.url = str(url)
        return self

    def sku_id(self, sku_id: int) -> ButtonBuilder:
        """Set the SKU of a premium button."""
        sku_id = int(sku_id)
        if sku_id <= 0:
            raise ValueError("sku_id must be a positive id")
        self._button.sku_id = sku_id
        return self

    def build(self) -> Button:
        """Validate and return the button."""
        _with_context("validate button", validate_button, self._button)
        return copy.deepcopy(self._button)

    def build_unchecked(self) -> Button:
        """Return the button without validating it."""
        return copy.deepcopy(self._button)


class ActionRowBuilder:
    """Fluent builder for an :class:`ActionRow`."""

    def __init__(self) -> None:
        self._row = ActionRow()

    def set_components(self, components: Iterable[Component]) -> ActionRowBuilder:
        """Replace the row's components."""
        self._row.components = list(components)
        return self

    def add_component(self, component: Component) -> ActionRowBuilder:
        """Append one component to the row."""
        self._row.components.append(component)
        return self

    def build(self) -> ActionRow:
        """Validate and return the action row."""
        _with_context("validate action row", validate_action_row, self._row)
        return copy.deepcopy(self._row)

    def build_unchecked(self) -> ActionRow:
        """Return the action row without validating it."""
        return copy.deepcopy(self._row)


class SelectMenuBuilder:
    """Fluent builder for a :class:`SelectMenu`."""

    def __init__(self, custom_id: str, kind: SelectMenuType) -> None:
        self._menu = SelectMenu(custom_id=str(custom_id), kind=SelectMenuType(kind))

    def disabled(self, disabled: bool) -> SelectMenuBuilder:
        """Set whether the menu is disabled."""
        self._menu.disabled = bool(disabled)
        return self

    def set_options(self, options: Iterable[SelectMenuOption]) -> SelectMenuBuilder:
        """Replace the menu's options."""
        self._menu.options = list(options)
        return self

    def add_option(self, option: SelectMenuOption) -> SelectMenuBuilder:
        """Append one option to the menu."""
        if self._menu.options is None:
            self._menu.options = []
        self._menu.options.append(option)
        return self

    def placeholder(self, placeholder: str) -> SelectMenuBuilder:
        """Set the text shown when nothing is selected."""
        self._menu.placeholder = str(placeholder)
        return self

    def min_values(self, min_values: int) -> SelectMenuBuilder:
        """Set the minimum number of values to select."""
        self._menu.min_values = _ranged(min_values, _U8_MAX, "min_values")
        return self

    def max_values(self, max_values: int) -> SelectMenuBuilder:
        """Set the maximum number of values to select."""
        self._menu.max_values = _ranged(max_values, _U8_MAX, "max_values")
        return self

    def channel_types(self, channel_types: Iterable[ChannelType]) -> SelectMenuBuilder:
        """Set the channel types a channel menu lists."""
        self._menu.channel_types = [ChannelType(t) for t in channel_types]
        return self

    def validate(self) -> SelectMenuBuilder:
        """Check the menu, raising :class:`ValidationError`; return the builder."""
        validate_select_menu(self._menu)
        return self

    def build(self) -> SelectMenu:
        """Return the select menu."""
        return copy.deepcopy(self._menu)


class SelectMenuOptionBuilder:
    """Fluent builder for a :class:`SelectMenuOption`."""

    def __init__(self, label: str, value: str) -> None:
        self._option = SelectMenuOption(label=str(label), value=str(value))

    def default(self, default: bool) -> SelectMenuOptionBuilder:
        """Set whether the option is selected by default."""
        self._option.default = bool(default)
        return self

    def description(self, description: str) -> SelectMenuOptionBuilder:
        """Set the option's description."""
        self._option.description = str(description)
        return self

    def emoji(self, emoji: Emoji) -> SelectMenuOptionBuilder:
        """Set the option's emoji icon."""
        self._option.emoji = emoji
        return self

    def build(self) -> SelectMenuOption:
        """Return the option."""
        return copy.deepcopy(self._option)