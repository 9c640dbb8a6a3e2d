import pytest

from magnolia.locale import Locale, locale_tag


def test_english_us_tag():
    assert locale_tag(Locale.ENGLISH_US) == "en-US"


@pytest.mark.parametrize(
    ("locale", "tag"),
    [
        (Locale.SPANISH_LATAM, "es-419"),
        (Locale.PORTUGUESE_BRAZILIAN, "pt-BR"),
        (Locale.CHINESE_TAIWAN, "zh-TW"),
        (Locale.SWEDISH, "sv-SE"),
    ],
)
def test_known_tags(locale, tag):
    assert locale_tag(locale) == tag


def test_other_locale_passes_through():
    assert locale_tag("tlh") == "tlh"


def test_str_matches_tag():
    for locale in Locale:
        assert str(locale) == locale_tag(locale)


def test_tags_are_unique():
    tags = [locale_tag(locale) for locale in Locale]
    assert len(tags) == len(set(tags)) == 32


def test_round_trip_from_tag():
    for locale in Locale:
        assert Locale(locale_tag(locale)) is locale


def test_rejects_non_string():
    with pytest.raises(TypeError):
        locale_tag(42)