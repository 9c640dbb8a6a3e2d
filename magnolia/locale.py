"""Locales understood by the chat platform's API."""

from __future__ import annotations

from enum import Enum
from typing import Union

__all__ = ["Locale", "LocaleLike", "locale_tag"]


class Locale(str, Enum):
    """A locale supported by the API, valued by its language tag."""

    INDONESIAN = "id"
    DANISH = "da"
    GERMAN = "de"
    ENGLISH_UK = "en-GB"
    ENGLISH_US = "en-US"
    SPANISH = "es-ES"
    SPANISH_LATAM = "es-419"
    FRENCH = "fr"
    CROATIAN = "hr"
    ITALIAN = "it"
    LITHUANIAN = "lt"
    HUNGARIAN = "hu"
    DUTCH = "nl"
    NORWEGIAN = "no"
    POLISH = "pl"
    PORTUGUESE_BRAZILIAN = "pt-BR"
    ROMANIAN_ROMANIA = "ro"
    FINNISH = "fi"
    SWEDISH = "sv-SE"
    VIETNAMESE = "vi"
    TURKISH = "tr"
    CZECH = "cs"
    GREEK = "el"
    BULGARIAN = "bg"
    RUSSIAN = "ru"
    UKRAINIAN = "uk"
    HINDI = "hi"
    THAI = "th"
    CHINESE_CHINA = "zh-CN"
    JAPANESE = "ja"
    CHINESE_TAIWAN = "zh-TW"
    KOREAN = "ko"

    def __str__(self) -> str:
        return self.value


# A known locale, or any other language tag given as a plain string.
LocaleLike = Union[Locale, str]


def locale_tag(locale: LocaleLike) -> str:
    """Return the language tag for a locale; plain strings pass through unchanged."""
    if isinstance(locale, Locale):
        return locale.value
    if isinstance(locale, str):
        return locale
    raise TypeError(f"expected a Locale or a str, got {type(locale).__name__}")