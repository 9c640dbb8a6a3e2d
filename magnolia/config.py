"""Bot configuration: role ids and FAQ responses loaded from a YAML file."""

from __future__ import annotations

import copy
import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields
from typing import Any, Optional, Union

import yaml

from magnolia.command_option import CommandOptionChoice
from magnolia.modal import InteractionResponseData

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "RoleConfig",
    "FaqOption",
    "Config",
    "load_config",
    "config_path",
    "validate_config",
]

DEFAULT_CONFIG_PATH = "magnolia.cfg.yml"
_U64_MAX = 0xFFFF_FFFF_FFFF_FFFF


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or parsed."""


@dataclass
class RoleConfig:
    """Ids of the roles the bot hands out."""

    devforum_member: int
    devforum_regular: int
    roblox_verified: Optional[int] = None


@dataclass
class FaqOption:
    """One choice of the FAQ command and the response it sends."""

    label: str
    value: str
    response: InteractionResponseData


@dataclass
class Config:
    """Configuration for the bot."""

    roles: RoleConfig
    faq_options: list[FaqOption] = field(default_factory=list)

    def faq_option_choices(self) -> list[CommandOptionChoice]:
        """Return the FAQ options as command option choices."""
        return [
            CommandOptionChoice(name=opt.label, value=opt.value)
            for opt in self.faq_options
        ]

    def faq_option_response(self, value: str) -> Optional[InteractionResponseData]:
        """Return a copy of the response for the option with this value, if any."""
        for opt in self.faq_options:
            if opt.value == value:
                return copy.deepcopy(opt.response)
        return None


def _require(mapping: Mapping, key: str, where: str) -> Any:
    if key not in mapping:
        raise ConfigError(f"{where}: missing field `{key}`")
    return mapping[key]


def _mapping(value: Any, where: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise ConfigError(f"{where}: expected a mapping")
    return value


def _string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{where}: expected a string")
    return value


def _parse_id(value: Any, where: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{where}: expected an id")
    if isinstance(value, str):
        if not value.isdigit():
            raise ConfigError(f"{where}: invalid id {value!r}")
        value = int(value)
    if not isinstance(value, int):
        raise ConfigError(f"{where}: expected an id")
    if not 0 < value <= _U64_MAX:
        raise ConfigError(f"{where}: id must be a non-zero 64-bit integer")
    return value


def _parse_roles(raw: Any) -> RoleConfig:
    roles = _mapping(raw, "roles")
    verified = roles.get("roblox_verified")
    return RoleConfig(
        devforum_member=_parse_id(
            _require(roles, "devforum_member", "roles"), "roles.devforum_member"
        ),
        devforum_regular=_parse_id(
            _require(roles, "devforum_regular", "roles"), "roles.devforum_regular"
        ),
        roblox_verified=None
        if verified is None
        else _parse_id(verified, "roles.roblox_verified"),
    )


_RESPONSE_KINDS: dict[str, tuple[type, ...]] = {
    "attachments": (list,),
    "choices": (list,),
    "components": (list,),
    "embeds": (list,),
    "content": (str,),
    "custom_id": (str,),
    "title": (str,),
    "tts": (bool,),
    "allowed_mentions": (dict,),
}


def _parse_response(raw: Any, where: str) -> InteractionResponseData:
    data = _mapping(raw, where)
    known = {f.name for f in fields(InteractionResponseData)}
    values: dict[str, Any] = {}
    for key, value in data.items():
        if key not in known or value is None:
            continue
        if key == "flags":
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{where}.flags: expected a non-negative integer")
        elif not isinstance(value, _RESPONSE_KINDS[key]):
            raise ConfigError(f"{where}.{key}: unexpected type {type(value).__name__}")
        values[key] = value
    return InteractionResponseData(**values)


def _parse_faq_option(raw: Any, index: int) -> FaqOption:
    where = f"faq_options[{index}]"
    opt = _mapping(raw, where)
    return FaqOption(
        label=_string(_require(opt, "label", where), f"{where}.label"),
        value=_string(_require(opt, "value", where), f"{where}.value"),
        response=_parse_response(_require(opt, "response", where), f"{where}.response"),
    )


def _parse_config(raw: Any) -> Config:
    doc = _mapping(raw, "config")
    options = _require(doc, "faq_options", "config")
    if not isinstance(options, Sequence) or isinstance(options, (str, bytes)):
        raise ConfigError("faq_options: expected a sequence")
    return Config(
        roles=_parse_roles(_require(doc, "roles", "config")),
        faq_options=[_parse_faq_option(opt, i) for i, opt in enumerate(options)],
    )


def load_config(path: Union[str, os.PathLike]) -> Config:
    """Load the configuration from a YAML file, raising :class:`ConfigError`."""
    try:
        with open(path, "rb") as handle:
            content = handle.read()
    except OSError as err:
        raise ConfigError(f"read config file: {err}") from err
    try:
        raw = yaml.safe_load(content)
        return _parse_config(raw)
    except yaml.YAMLError as err:
        raise ConfigError(f"parse config file: {err}") from err
    except ConfigError as err:
        raise ConfigError(f"parse config file: {err}") from err


def config_path(argv: Optional[Sequence[str]] = None) -> str:
    """Return the config path from the first argument, or the default path."""
    args = sys.argv[1:] if argv is None else list(argv)
    return args[0] if args else DEFAULT_CONFIG_PATH


def validate_config(path: Union[str, os.PathLike, None] = None) -> Config:
    """Load the configuration only to check it; return it when it is valid."""
    return load_config(DEFAULT_CONFIG_PATH if path is None else path)