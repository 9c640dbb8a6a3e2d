# magnolia

magnolia builds the pieces of a chat bot's interaction layer as plain Python objects and
checks them against the chat platform's limits before they are used. It also loads the
bot's YAML configuration and builds the FAQ command's options and replies from it.

## Modules

- **`magnolia.command_option`** holds `CommandOption`, `CommandOptionChoice`, the
  `CommandOptionType` and `ChannelType` enums, and `CommandOptionBuilder`. The builder is
  fluent: `choices`, `choice`, `options`, `option`, `channel_types`, `min_length`,
  `max_length`, `required`, `autocomplete`, `name_localizations` and
  `description_localizations`. `validate()` checks the option and `build()` validates and
  returns a copy. `build_unchecked()` returns a copy without checking it. A broken rule
  raises `ValidationError`, which is a subclass of `ValueError`. Examples of broken rules
  are a name that does not match the name pattern, an empty description or one over 100
  bytes, more than 25 choices or sub-options, an attribute the option type does not
  support, and `min_length` greater than `max_length`. Lengths outside 0–65535 raise
  `ValueError` as soon as they are set.
- **`magnolia.component`** holds the `Button`, `ActionRow`, `SelectMenu`,
  `SelectMenuOption`, `TextInput` and `Emoji` dataclasses, and the `ButtonStyle`,
  `SelectMenuType` and `TextInputStyle` enums. It has `ButtonBuilder`, `ActionRowBuilder`,
  `SelectMenuBuilder` and `SelectMenuOptionBuilder`, and the checks `validate_button`,
  `validate_action_row`, `validate_select_menu` and `validate_text_input`.
- **`magnolia.modal`** holds `TextInputBuilder` and `ModalBuilder`. `ModalBuilder.build()`
  returns an `InteractionResponse` of kind `InteractionResponseType.MODAL`. It requires a
  title of at most 45 bytes and a custom id of at most 100 bytes, both non-empty. The
  modal must have one to five components, and each one must be an action row holding
  exactly one component.
- **`magnolia.locale`** holds the `Locale` enum, whose values are language tags such as
  `en-US`. `locale_tag()` returns a locale's tag and passes any other string through
  unchanged.
- **`magnolia.config`** holds `load_config(path)`, which reads a YAML file into a `Config`
  and raises `ConfigError` when the file cannot be read or parsed. `config_path(argv)`
  returns the first argument, or `magnolia.cfg.yml` when there is none; it reads
  `sys.argv[1:]` when `argv` is omitted. `validate_config(path)` loads a file only to
  check it. `Config.faq_option_choices()` lists the FAQ choices.
  `Config.faq_option_response(value)` returns a copy of the configured response, or
  `None` when no option has that value.
- **`magnolia.commands`** holds `config_file_type_option()` and `FileType` (`Rust` or
  `YAML`, read with `FileType.parse`). `faq_options(config)` builds the FAQ command's
  `query` and `mention` options. `with_mention(response, user_id)` puts `<@id>` in front
  of a response's content. `faq_response(config, query, mention)` builds the FAQ reply;
  it raises `ValueError` for an unknown query.

## Configuration file

```yaml
roles:
  devforum_member: 111111111111111111
  devforum_regular: 222222222222222222
  roblox_verified: 333333333333333333   # optional

faq_options:
  - label: How do I get verified?
    value: verification
    response:
      content: Use the button in the roles channel to update your roles.
```

Role ids must be non-zero 64-bit integers. They may also be written as strings of
digits. Each FAQ option needs a `label`, which is shown to the user, a `value`, which
identifies it, and a `response`. The `response` takes the fields of
`InteractionResponseData`: `content`, `title`, `custom_id`, `tts`, `flags`, `embeds`,
`components`, `attachments`, `choices` and `allowed_mentions`. Unknown keys are ignored.
A value of the wrong type raises `ConfigError`.

## Usage

```python
from magnolia.config import load_config, ConfigError
from magnolia.commands import faq_response

try:
    config = load_config("magnolia.cfg.yml")
except ConfigError as exc:
    raise SystemExit(f"bad configuration: {exc}")

choices = config.faq_option_choices()

response = faq_response(config, "verification", 444444444444444444)
print(response.data.content)
# <@444444444444444444> Use the button in the roles channel to update your roles.
```

```python
from magnolia.command_option import CommandOptionBuilder, CommandOptionType, ValidationError

try:
    CommandOptionBuilder("name", "A name", CommandOptionType.STRING).min_length(10).max_length(5).build()
except ValidationError as exc:
    print(exc)  # validate command option: Min length must not be greater than max length
```

## What it does not do

magnolia does not connect to the chat platform. It does not log in, receive events,
register commands, or send replies, messages or files. It has no command-line program
and no running bot. It produces and checks the objects a bot would send, and it is up
to your own client code to deliver them.