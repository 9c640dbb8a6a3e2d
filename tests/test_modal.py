import pytest

from magnolia.command_option import ValidationError
from magnolia.component import (
    ActionRow,
    ActionRowBuilder,
    ButtonBuilder,
    ButtonStyle,
    TextInput,
    TextInputStyle,
)
from magnolia.modal import (
    InteractionResponseType,
    ModalBuilder,
    TextInputBuilder,
)

CUSTOM_ID = "custom_id"
TEXT = "Label"


def text_input_model():
    return TextInputBuilder(TEXT, CUSTOM_ID, TextInputStyle.SHORT).build()


def modal_action_row():
    return ActionRowBuilder().add_component(text_input_model()).build()


def test_text_input():
    text_input = (
        TextInputBuilder(TEXT, CUSTOM_ID, TextInputStyle.SHORT)
        .max_length(10)
        .min_length(5)
        .placeholder(TEXT)
        .required(True)
        .value(TEXT)
        .build()
    )
    assert isinstance(text_input, TextInput)
    assert text_input.custom_id == CUSTOM_ID
    assert text_input.label == TEXT
    assert text_input.max_length == 10
    assert text_input.min_length == 5
    assert text_input.placeholder == TEXT
    assert text_input.required is True
    assert text_input.value == TEXT


def test_modal():
    row = modal_action_row()
    modal = ModalBuilder(TEXT, CUSTOM_ID).set_components([row]).add_component(row).build()
    assert modal.kind is InteractionResponseType.MODAL
    assert modal.data.title == TEXT
    assert modal.data.custom_id == CUSTOM_ID
    assert len(modal.data.components) == 2


def test_text_input_invalid_label():
    with pytest.raises(ValidationError, match="validate modal text input"):
        TextInputBuilder("", CUSTOM_ID, TextInputStyle.SHORT).build()


def test_text_input_length_out_of_range():
    with pytest.raises(ValueError):
        TextInputBuilder(TEXT, CUSTOM_ID, TextInputStyle.SHORT).max_length(70000)


def test_modal_without_components():
    with pytest.raises(ValidationError, match="at least one component"):
        ModalBuilder(TEXT, CUSTOM_ID).build()


def test_modal_too_many_components():
    builder = ModalBuilder(TEXT, CUSTOM_ID).set_components([modal_action_row()] * 6)
    with pytest.raises(ValidationError, match="more than 5 components"):
        builder.build()


def test_modal_rejects_non_action_row():
    builder = ModalBuilder(TEXT, CUSTOM_ID).add_component(text_input_model())
    with pytest.raises(ValidationError, match="only contain ActionRow"):
        builder.build()


def test_modal_action_row_needs_exactly_one_component():
    row = ActionRow(components=[text_input_model(), text_input_model()])
    with pytest.raises(ValidationError, match="exactly one TextInput"):
        ModalBuilder(TEXT, CUSTOM_ID).add_component(row).build()


def test_modal_validates_action_row_children():
    bad_input = TextInput(custom_id=CUSTOM_ID, label="", style=TextInputStyle.SHORT)
    with pytest.raises(ValidationError, match="validate action row"):
        ModalBuilder(TEXT, CUSTOM_ID).add_component(ActionRow(components=[bad_input])).build()


def test_modal_title_rules():
    with pytest.raises(ValidationError, match="Title must not be empty"):
        ModalBuilder("", CUSTOM_ID).add_component(modal_action_row()).build()
    with pytest.raises(ValidationError, match="Title must not exceed 45"):
        ModalBuilder("t" * 46, CUSTOM_ID).add_component(modal_action_row()).build()
    modal = ModalBuilder("t" * 45, CUSTOM_ID).add_component(modal_action_row()).build()
    assert modal.data.title == "t" * 45


def test_modal_custom_id_rules():
    with pytest.raises(ValidationError, match="Custom ID must not be empty"):
        ModalBuilder(TEXT, "").add_component(modal_action_row()).build()
    with pytest.raises(ValidationError, match="Custom ID must not exceed 100"):
        ModalBuilder(TEXT, "c" * 101).add_component(modal_action_row()).build()


def test_modal_build_unchecked_skips_validation():
    response = ModalBuilder("", "").build_unchecked()
    assert response.kind is InteractionResponseType.MODAL
    assert response.data.components is None
    assert response.data.title == ""


def test_modal_accepts_button_row_with_one_component():
    row = ActionRowBuilder().add_component(
        ButtonBuilder(CUSTOM_ID, ButtonStyle.PRIMARY).build()
    ).build()
    modal = ModalBuilder(TEXT, CUSTOM_ID).add_component(row).build()
    assert len(modal.data.components) == 1