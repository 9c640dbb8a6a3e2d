import pytest

from magnolia.config import (
    DEFAULT_CONFIG_PATH,
    Config,
    ConfigError,
    FaqOption,
    RoleConfig,
    config_path,
    load_config,
    validate_config,
)
from magnolia.modal import InteractionResponseData

VALID_YAML = """\
roles:
  devforum_member: 111
  devforum_regular: "222"
faq_options:
  - label: Rules
    value: rules
    response:
      content: Read the rules.
      flags: 64
  - label: Help
    value: help
    response:
      embeds:
        - title: Help
"""


def write(tmp_path, text):
    path = tmp_path / "cfg.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_valid_config(tmp_path):
    cfg = load_config(write(tmp_path, VALID_YAML))
    assert cfg.roles.devforum_member == 111
    assert cfg.roles.devforum_regular == 222
    assert cfg.roles.roblox_verified is None
    assert [opt.value for opt in cfg.faq_options] == ["rules", "help"]
    assert cfg.faq_options[0].response.content == "Read the rules."
    assert cfg.faq_options[0].response.flags == 64
    assert cfg.faq_options[1].response.embeds == [{"title": "Help"}]


def test_optional_role_parsed(tmp_path):
    text = VALID_YAML.replace('  devforum_regular: "222"\n', '  devforum_regular: "222"\n  roblox_verified: 333\n')
    cfg = load_config(write(tmp_path, text))
    assert cfg.roles.roblox_verified == 333


def test_choices_follow_options(tmp_path):
    cfg = load_config(write(tmp_path, VALID_YAML))
    choices = cfg.faq_option_choices()
    assert [(c.name, c.value) for c in choices] == [("Rules", "rules"), ("Help", "help")]


def test_response_lookup_returns_copy():
    cfg = Config(
        roles=RoleConfig(1, 2),
        faq_options=[FaqOption("Rules", "rules", InteractionResponseData(content="x"))],
    )
    response = cfg.faq_option_response("rules")
    assert response.content == "x"
    response.content = "changed"
    assert cfg.faq_option_response("rules").content == "x"
    assert cfg.faq_option_response("missing") is None


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="read config file"):
        load_config(tmp_path / "absent.yml")


def test_invalid_yaml(tmp_path):
    with pytest.raises(ConfigError, match="parse config file"):
        load_config(write(tmp_path, "roles: [unclosed"))


def test_missing_roles(tmp_path):
    with pytest.raises(ConfigError, match="roles"):
        load_config(write(tmp_path, "faq_options: []\n"))


def test_zero_id_rejected(tmp_path):
    text = VALID_YAML.replace("devforum_member: 111", "devforum_member: 0")
    with pytest.raises(ConfigError, match="devforum_member"):
        load_config(write(tmp_path, text))


def test_bad_content_type(tmp_path):
    text = VALID_YAML.replace("content: Read the rules.", "content: [1]")
    with pytest.raises(ConfigError, match="content"):
        load_config(write(tmp_path, text))


def test_config_path():
    assert config_path([]) == DEFAULT_CONFIG_PATH
    assert config_path(["other.yml"]) == "other.yml"


def test_validate_config(tmp_path):
    cfg = validate_config(write(tmp_path, VALID_YAML))
    assert len(cfg.faq_options) == 2
    with pytest.raises(ConfigError):
        validate_config(tmp_path / "absent.yml")