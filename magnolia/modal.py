"""Text inputs and modal interaction responses."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

from magnolia.command_option import ValidationError
from magnolia.component import (
    ActionRow,
    Component,
    TextInput,
    TextInputStyle,
    validate_action_row,
    validate_text_input,
)

__all__ = [
    "InteractionResponseType",
    "InteractionResponseData",
    "InteractionResponse",
    "TextInputBuilder",
    "ModalBuilder",
]

MODAL_COMPONENT_COUNT = 5
MODAL_TITLE_LENGTH = 45
MODAL_CUSTOM_ID_LENGTH = 100
_U16_MAX = 0xFFFF


class InteractionResponseType(IntEnum):
    """The kind of a response to an interaction."""

    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    DEFERRED_CHANNEL_MESSAGE_WITH_SOURCE = 5
    DEFERRED_UPDATE_MESSAGE = 6
    UPDATE_MESSAGE = 7
    APPLICATION_COMMAND_AUTOCOMPLETE_RESULT = 8
    MODAL = 9
    PREMIUM_REQUIRED = 10


@dataclass
class InteractionResponseData:
    """The payload of an interaction response."""

    allowed_mentions: Optional[Any] = None
    attachments: Optional[list] = None
    choices: Optional[list] = None
    components: Optional[list] = None
    content: Optional[str] = None
    custom_id: Optional[str] = None
    embeds: Optional[list] = None
    flags: Optional[int] = None
    title: Optional[str] = None
    tts: Optional[bool] = None


@dataclass
class InteractionResponse:
    """A response to an interaction."""

    kind: InteractionResponseType
    data: Optional[InteractionResponseData] = None


def _u16(value: int, what: str) -> int:
    value = int(value)
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{what} must be between 0 and {_U16_MAX}")
    return value


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class TextInputBuilder:
    """Fluent builder for a :class:`TextInput`."""

    def __init__(self, label: str, custom_id: str, style: TextInputStyle) -> None:
        self._input = TextInput(
            custom_id=str(custom_id), label=str(label), style=TextInputStyle(style)
        )

    def max_length(self, max_length: int) -> TextInputBuilder:
        """Set the maximum input length."""
        self._input.max_length = _u16(max_length, "max_length")
        return self

    def min_length(self, min_length: int) -> TextInputBuilder:
        """Set the minimum input length."""
        self._input.min_length = _u16(min_length, "min_length")
        return self

    def placeholder(self, placeholder: str) -> TextInputBuilder:
        """Set the placeholder text."""
        self._input.placeholder = str(placeholder)
        return self

    def required(self, required: bool) -> TextInputBuilder:
        """Set whether the input must be filled in."""
        self._input.required = bool(required)
        return self

    def value(self, value: str) -> TextInputBuilder:
        """Set the initial value."""
        self._input.value = str(value)
        return self

    def build(self) -> TextInput:
        """Validate and return the text input."""
        try:
            validate_text_input(self._input)
        except ValidationError as err:
            raise ValidationError(f"validate modal text input: {err}") from err
        return copy.deepcopy(self._input)

    def build_unchecked(self) -> TextInput:
        """Return the text input without validating it."""
        return copy.deepcopy(self._input)


class ModalBuilder:
    """Fluent builder for a modal :class:`InteractionResponse`."""

    def __init__(self, title: str, custom_id: str) -> None:
        self._data = InteractionResponseData(custom_id=str(custom_id), title=str(title))

    def set_components(self, components: Iterable[Component]) -> ModalBuilder:
        """Replace the modal's components."""
        self._data.components = list(components)
        return self

    def add_component(self, component: Component) -> ModalBuilder:
        """Append one component to the modal."""
        if self._data.components is None:
            self._data.components = []
        self._data.components.append(component)
        return self

    def validate(self) -> None:
        """Check the modal against the API's rules, raising :class:`ValidationError`."""
        title = self._data.title
        if not title:
            raise ValidationError("Title must not be empty")
        if _byte_len(title) > MODAL_TITLE_LENGTH:
            raise ValidationError(f"Title must not exceed {MODAL_TITLE_LENGTH} characters")

        custom_id = self._data.custom_id
        if not custom_id:
            raise ValidationError("Custom ID must not be empty")
        if _byte_len(custom_id) > MODAL_CUSTOM_ID_LENGTH:
            raise ValidationError(
                f"Custom ID must not exceed {MODAL_CUSTOM_ID_LENGTH} characters"
            )

        components = self._data.components
        if components is None:
            raise ValidationError("Modal must have at least one component")
        if len(components) > MODAL_COMPONENT_COUNT:
            raise ValidationError(
                f"Modal must not have more than {MODAL_COMPONENT_COUNT} components"
            )

        for component in components:
            if not isinstance(component, ActionRow):
                raise ValidationError("Modal must only contain ActionRow components")
            if len(component.components) != 1:
                raise ValidationError("ActionRow must contain exactly one TextInput component")
            try:
                validate_action_row(component)
            except ValidationError as err:
                raise ValidationError(f"validate action row: {err}") from err

    def build(self) -> InteractionResponse:
        """Validate and return the modal response."""
        try:
            self.validate()
        except ValidationError as err:
            raise ValidationError(f"validate modal: {err}") from err
        return self.build_unchecked()

    def build_unchecked(self) -> InteractionResponse:
        """Return the modal response without validating it."""
        return InteractionResponse(
            kind=InteractionResponseType.MODAL, data=copy.deepcopy(self._data)
        )